"""Logic for synthesizing copy-paste import statements for a module item."""

from dataclasses import dataclass

from docpages.camelize import camelize
from docpages.parse_url import parse_url


@dataclass(frozen=True)
class ParsedUsage:
    """The pieces of a generated usage snippet.

    ``import_symbol`` is what the module (or item) is imported as. When
    ``usage_symbol`` is set, the item lives on a namespace and is destructured
    out of ``local_var`` in a second statement.
    """

    import_symbol: str
    import_statement: str
    local_var: str | None = None
    usage_symbol: str | None = None


def parse_usage(
    url: str,
    item: str | None = None,
    is_type: bool | None = None,
    *,
    default_symbol: str = "mod",
) -> ParsedUsage:
    """Build the usage of an item (or the whole module when item is None)."""
    parsed = parse_url(url)
    item_parts = item.split(".") if item else None
    # namespace imports get a camelized guess from the package name
    if item_parts:
        import_symbol = item_parts[0]
    else:
        package = parsed.package if parsed else None
        import_symbol = camelize(package or default_symbol)

    usage_symbol = None
    local_var = None
    if item_parts and len(item_parts) > 1:
        usage_symbol = item_parts.pop()
        # nested namespaces are re-joined rather than destructured level by level
        local_var = ".".join(item_parts)

    if item:
        type_kw = "type " if is_type else ""
        import_statement = f'import {type_kw}{{ {import_symbol} }} from "{url}";\n'
    else:
        import_statement = f'import * as {import_symbol} from "{url}";\n'
    if usage_symbol:
        import_statement += f"\nconst {{ {usage_symbol} }} = {local_var};\n"

    return ParsedUsage(
        import_symbol=import_symbol,
        import_statement=import_statement,
        local_var=local_var,
        usage_symbol=usage_symbol,
    )
