"""Sub-command modules; importing one registers its commands on the shared app."""
