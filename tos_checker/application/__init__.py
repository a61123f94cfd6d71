"""Application layer: use-case services orchestrating core and boundary."""
