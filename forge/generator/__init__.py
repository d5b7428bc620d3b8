"""Project generation: orchestrator plus one executor per template kind."""

from forge.generator.executor import ExecuteParams, Executor, resolve_output_dir
from forge.generator.files import FileTemplateExecutor
from forge.generator.maven import MavenExecutor
from forge.generator.orchestrator import GenerationRequest, GenerationResult, Generator

__all__ = [
    "ExecuteParams",
    "Executor",
    "FileTemplateExecutor",
    "GenerationRequest",
    "GenerationResult",
    "Generator",
    "MavenExecutor",
    "resolve_output_dir",
]
