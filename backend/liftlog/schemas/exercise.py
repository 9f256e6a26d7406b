from typing import Annotated
from pydantic import BaseModel, StringConstraints

# Trimmed; blank strings rejected
NameStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=120)]
CategoryStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=60)]

class ExerciseCreate(BaseModel):
    name: NameStr
    category: CategoryStr

class ExerciseUpdate(ExerciseCreate):
    pass

class ExerciseRead(BaseModel):
    id: int
    name: str
    category: str

    model_config = {"from_attributes": True}
