"""Pure prescription engine: scaling, age/phase rules, progressions, warm-ups."""
