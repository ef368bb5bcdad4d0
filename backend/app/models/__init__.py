from app.models.material import Material

__all__ = [
    "Material",
]
