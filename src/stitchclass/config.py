from dataclasses import dataclass


@dataclass
class Settings:
    ignore_overlap: bool = False
    axis_separator: str = ","
    bound_separator: str = ":"
    label_separator: str = "+"
