"""Config and logging helpers for atom_chain."""
