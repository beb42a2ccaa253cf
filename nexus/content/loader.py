"""Load FAQ documents from TOML or JSON files."""

from pathlib import Path

from pydantic import ValidationError

from nexus.config.loader import UnsupportedDocumentError, read_document, resolve_data_path
from nexus.content.defaults import DEFAULT_FAQ
from nexus.content.models import FAQDocument
from nexus.exceptions import ContentError
from nexus.observability.logging import get_logger

logger = get_logger(__name__)


def load_faq_document(path: Path | None = None) -> FAQDocument:
    """Load and validate an FAQ document.

    Relative paths are resolved against the project root, the same place
    config/ is found.

    Args:
        path: A .toml or .json file; the built-in content when None

    Raises:
        ContentError: If the file is missing, unparseable or invalid
    """
    if path is None:
        return FAQDocument.model_validate(DEFAULT_FAQ)

    try:
        resolved = resolve_data_path(path)
        raw = read_document(resolved)
    except FileNotFoundError as e:
        raise ContentError(f"FAQ file not found: {path}") from e
    except UnsupportedDocumentError as e:
        raise ContentError(f"Unsupported FAQ file type: {path.suffix or path.name}") from e
    except ValueError as e:
        raise ContentError(f"Cannot parse FAQ file {path}: {e}") from e

    try:
        document = FAQDocument.model_validate(raw)
    except ValidationError as e:
        raise ContentError(f"Invalid FAQ file {resolved}: {e}") from e

    logger.info(
        "faq_loaded",
        path=str(resolved),
        categories=len(document.categories),
        version=document.metadata.version,
    )
    return document
