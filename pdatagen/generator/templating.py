"""Named placeholder expansion over the packaged Go templates."""

from collections.abc import Mapping

from jinja2 import Environment, PackageLoader, StrictUndefined, UndefinedError, meta

env = Environment(
    loader=PackageLoader("pdatagen.generator", "templates"),
    trim_blocks=True,
    lstrip_blocks=True,
    undefined=StrictUndefined,
    autoescape=False,
)


class UnresolvedPlaceholderError(AssertionError):
    """Raised when a template references a placeholder its mapping does not provide.

    This is always a defect in the generator itself: the mapping a field kind
    builds is incomplete relative to the template it drives.
    """


def expand(template_name: str, mapping: Mapping[str, str]) -> str:
    """Expand every placeholder of a packaged template.

    Placeholders are replaced left to right and the replacement text is
    inserted verbatim, it is never expanded again.
    """
    template = env.get_template(template_name)
    try:
        return template.render(mapping)
    except UndefinedError as e:
        raise UnresolvedPlaceholderError(f"{template_name}: {e.message}") from e


def template_placeholders(template_name: str) -> frozenset[str]:
    """Return the placeholder names referenced by a packaged template."""
    assert env.loader is not None
    source, _, _ = env.loader.get_source(env, template_name)
    return frozenset(meta.find_undeclared_variables(env.parse(source)))


def comment_lines(text: str) -> str:
    """Turn plain text into a Go line comment block."""
    return "\n".join(f"// {line}".rstrip() for line in text.splitlines())
