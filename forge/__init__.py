"""forge -- scaffold new projects from reusable templates.

Quick usage::

    from forge.config import Config
    from forge.generator import GenerationRequest, Generator
    from forge.output import Printer
    from forge.templates import Registry

    config = Config.from_env()
    registry = Registry(config.templates_dir)
    generator = Generator(registry.get("go-service"), Printer(config))
    result = await generator.generate(
        GenerationRequest(artifact_id="my-api", module="github.com/acme/my-api")
    )
"""

__version__ = "1.0.0"
