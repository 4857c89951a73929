from .uuid_id_generator import UuidIdGenerator
from .structured_logger import StructuredLogger

__all__ = ["UuidIdGenerator", "StructuredLogger"]
