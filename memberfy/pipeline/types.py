from pydantic import BaseModel, ConfigDict
from typing import Optional, List, Tuple

RGB = Tuple[int, int, int]
Palette = List[RGB]   # одна тройка на клетку сетки, построчно


class ProfileBody(BaseModel):
    model_config = ConfigDict(extra="ignore")

    avatarUrl: Optional[str] = None

class SearchcasterProfile(BaseModel):
    model_config = ConfigDict(extra="ignore")

    body: Optional[ProfileBody] = None

class Cell(BaseModel):
    x: int   # колонка
    y: int   # строка

class FrameImage(BaseModel):
    src: str                 # data:image/png;base64,... или fallback URL
    download_url: str
    generated: bool = False

class VariantOut(BaseModel):
    name: str
    grid: Tuple[int, int]
    downsample: Optional[Tuple[int, int]] = None
    method: str
    fragments: int
