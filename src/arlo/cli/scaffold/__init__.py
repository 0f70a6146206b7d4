"""Backend template files rendered by ``arlo init``."""
