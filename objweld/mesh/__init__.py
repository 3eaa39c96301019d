from objweld.mesh.mesh_data import MeshData

__all__ = ["MeshData"]
