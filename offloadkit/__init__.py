"""Pipeline descriptions, capabilities, colors and image comparison, and DirectX/Metal layout rules for GPU compute tests."""

__version__ = "0.1.0"