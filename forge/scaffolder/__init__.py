"""forge scaffolder -- renders file templates into a project tree.

Quick usage::

    from forge.scaffolder import RenderContext, TemplateRenderer

    renderer = TemplateRenderer("templates/go-service/files")
    written = await renderer.render_tree(
        "/tmp/output",
        RenderContext(project_name="my-api", module_name="github.com/acme/my-api"),
    )
"""

from forge.scaffolder.renderer import (
    PROJECT_NAME_TOKEN,
    TEMPLATE_SUFFIX,
    RenderContext,
    TemplateRenderer,
    transform_path,
)

__all__ = [
    "PROJECT_NAME_TOKEN",
    "RenderContext",
    "TEMPLATE_SUFFIX",
    "TemplateRenderer",
    "transform_path",
]
