"""3D math, scene graph, materials and OBJ/MD5 mesh loaders."""

__version__ = "0.1.0"