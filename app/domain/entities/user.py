from pydantic import BaseModel
from typing import Optional


class User(BaseModel):
    """
    Usuario gestionado por el repositorio.

    En una aplicacion real esta entidad se mapea a una tabla o coleccion.
    El id lo asigna quien crea el usuario; el sistema no exige que sea unico.
    """
    id: int  # Clave primaria
    name: Optional[str] = None

    def to_dict(self) -> dict:
        return self.model_dump()
