from fromasync.helpers.constructing import accepts_elements, is_constructible, make_container
from fromasync.helpers.materializing import MAX_SAFE_INDEX, Materializable, materialize

__all__ = (
    "MAX_SAFE_INDEX",
    "Materializable",
    "accepts_elements",
    "is_constructible",
    "make_container",
    "materialize",
)
