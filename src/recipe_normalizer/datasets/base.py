# datasets/base.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List


@dataclass
# Free-text recipe, e.g. a Reddit comment under a recipe thread
class CommentSource:
    title: str
    comment: str
    meta: Dict = field(default_factory=dict)    # author / date / ids, passed through untouched


@dataclass
# Row that already carries separate ingredient and direction arrays (Stromberg-style datasets)
class ArraySource:
    title: str
    ingredients: List[str]
    directions: List[str]
    meta: Dict = field(default_factory=dict)
