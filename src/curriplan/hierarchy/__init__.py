"""
Hierarchy Module

Level descriptors, generic CRUD, tree assembly, and bulk import for the
Curriculum → Grade → Book → Unit → Lesson → Stage → Activity hierarchy.
"""

from .importer import CurriculumImporter, extract_documents
from .levels import LEVELS, Level, child_of
from .objectives import decode_objectives, encode_objectives
from .tree import TreeRows, assemble_tree

__all__ = [
    "CurriculumImporter",
    "LEVELS",
    "Level",
    "TreeRows",
    "assemble_tree",
    "child_of",
    "decode_objectives",
    "encode_objectives",
    "extract_documents",
]
