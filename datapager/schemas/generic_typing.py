from typing import TypeVar

from pydantic import BaseModel

GenericModelType = TypeVar("GenericModelType", bound=BaseModel)
