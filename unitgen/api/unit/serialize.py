"""Serialize a Service aggregate to .service unit-file text."""

from ...logging_config import get_logger
from .render_value import render_value
from .Service import Service

logger = get_logger("unit.serialize")


def serialize(service: Service) -> str:
    """Render a service as unit-file text.

    Sections are emitted in the order [Unit], [Service], [Install], each
    introduced by its header and separated from the previous one by a blank
    line. Within a section one ``Key=Value`` line is written per field whose
    rendered value is non-empty, in catalog order. The result is a pure
    function of the record.

    Args:
        service: Fully built service aggregate

    Returns:
        Unit-file text ending with a newline
    """
    chunks: list[str] = []
    emitted = 0
    for index, section in enumerate(service.sections()):
        header = f"[{section.HEADER}]\n"
        chunks.append(header if index == 0 else f"\n{header}")
        for field_spec in section.FIELDS:
            text = render_value(field_spec.read(section))
            if not text:
                continue
            chunks.append(f"{field_spec.key}={text}\n")
            emitted += 1

    logger.debug("Serialized %s with %d key lines", service.file_name, emitted)
    return "".join(chunks)
