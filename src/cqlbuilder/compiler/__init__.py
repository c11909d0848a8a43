"""Compilation of query documents to CQL."""

from cqlbuilder.compiler.pipeline import CompilationPipeline, CompilationResult

__all__ = [
    "CompilationPipeline",
    "CompilationResult",
]
