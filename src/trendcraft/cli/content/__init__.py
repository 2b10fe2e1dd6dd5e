"""Content generation commands."""
