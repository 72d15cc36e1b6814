"""Basic import tests to verify package structure."""


def test_import_halftone():
    """Verify main package imports."""
    import halftone
    assert halftone.__version__ == "0.1.0"


def test_import_core():
    """Verify core module structure exists."""
    from halftone import core
    assert hasattr(core, "HalftoneSimulation")
    assert hasattr(core, "ImpulsePool")


def test_import_viz():
    """Verify viz module structure exists."""
    from halftone import viz
    assert hasattr(viz, "rasterize")


def test_import_logger_setup():
    from halftone import logger_setup
    assert logger_setup.LOGGER_NAME == "halftone"
