"""
Historical Translation MCP Server
Extracts text from early-modern facsimiles, manages glossaries of historical
terminology and surfaces that terminology in submitted text, built with the
FastMCP framework.
"""

import json
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Annotated, Literal

import yaml
from dotenv import load_dotenv
from fastmcp import Context, FastMCP
from pydantic import Field

from .config import Settings
from .extractors import (
    ExtractionError,
    extract_document_text,
    extract_glossary_text,
)
from .glossary import ProgressSink
from .session import TranslationSession

logger = logging.getLogger("historical-translation")

SERVER_NAME = "historical-translation-server"

YAML_EXTENSIONS = {".yaml", ".yml"}


# ----------------------------------------------------------------------
# Tool logic
# ----------------------------------------------------------------------

def _extract_text_logic(file_path: str, document_type: str | None = None, ocr_language: str = "eng") -> str:
    try:
        extracted = extract_document_text(file_path, document_type=document_type, ocr_language=ocr_language)
    except ExtractionError as e:
        logger.error("Text extraction failed for %s: %s", file_path, e)
        return f"Error extracting text: {e}"

    if extracted.kind == "pdf":
        return f"Text extracted from PDF ({extracted.page_count} pages):\n\n{extracted.text}"
    return f"Text extracted from image:\n\n{extracted.text}"


def _load_glossary_logic(session: TranslationSession, file_path: str, glossary_name: str) -> str:
    path = Path(file_path)
    try:
        if path.suffix.lower() in YAML_EXTENSIONS:
            glossary = session.load_glossary_file(path, name=glossary_name)
        else:
            glossary = session.load_glossary_text(glossary_name, extract_glossary_text(path))
    except (ExtractionError, ValueError, TypeError, OSError, yaml.YAMLError) as e:
        logger.error("Loading glossary '%s' from %s failed: %s", glossary_name, file_path, e)
        return f"Error loading glossary: {e}"

    return f"Glossary '{glossary_name}' loaded successfully. {len(glossary.entries)} entries processed."


def _translate_text_logic(
    session: TranslationSession,
    text: str,
    context: str | None = None,
    use_glossaries: Sequence[str] | None = None,
    progress: ProgressSink | None = None,
) -> str:
    result = session.translate(text, context=context, use_glossaries=use_glossaries, progress=progress)
    logger.debug(
        "Translation #%d: %d terminology matches",
        session.translation_count,
        len(result.terminology),
    )
    return result.model_dump_json(by_alias=True, indent=2)


def _search_terminology_logic(session: TranslationSession, term: str, context_filter: str | None = None) -> str:
    matches = session.search(term, context_filter)
    return json.dumps([m.model_dump(mode="json") for m in matches], indent=2, ensure_ascii=False)


async def _forward_progress(ctx: Context, updates: Sequence[tuple[float, float]]) -> None:
    """Send collected progress updates to the client.

    FastMCP drops them when the request carried no progress token. A failed
    notification stops further updates but never fails the tool call.
    """
    for current, total in updates:
        try:
            await ctx.report_progress(progress=current, total=total)
        except Exception as e:
            logger.warning("Progress notification failed: %s", e)
            break


def _loaded_glossaries_resource(session: TranslationSession) -> str:
    stats = session.glossary_stats()
    return json.dumps([s.model_dump(mode="json", by_alias=True) for s in stats], indent=2, ensure_ascii=False)


def _translation_stats_resource(session: TranslationSession) -> str:
    return session.stats().model_dump_json(by_alias=True, indent=2)


# ----------------------------------------------------------------------
# Server
# ----------------------------------------------------------------------

def create_server(session: TranslationSession | None = None, settings: Settings | None = None) -> FastMCP:
    """Build the MCP server around a translation session.

    Args:
        session: Session to serve; a fresh one is created when omitted
        settings: Runtime settings; read from the environment when omitted

    Returns:
        Configured FastMCP server
    """
    settings = settings or Settings.from_env()
    if session is None:
        session = TranslationSession(default_period=settings.default_period)
        if settings.glossary_dir is not None:
            count = session.preload_directory(settings.glossary_dir)
            logger.info("📚 Preloaded %d glossaries from %s", count, settings.glossary_dir)

    mcp = FastMCP(name=SERVER_NAME)

    @mcp.tool
    def extract_text_from_document(
        file_path: Annotated[str, Field(description="Path to a PDF or a scanned image (PNG, JPG, TIFF)")],
        document_type: Annotated[
            Literal["facsimile", "glossary", "reference"] | None,
            Field(description="Kind of document being read"),
        ] = None,
    ) -> str:
        """Extract text from a PDF or run OCR over a historical facsimile.

        OCR output is cleaned of long s, ligatures and merged words.
        """
        return _extract_text_logic(file_path, document_type, ocr_language=settings.ocr_language)

    @mcp.tool
    def load_glossary(
        file_path: Annotated[str, Field(description="Path to the glossary file (.docx, .pdf, .txt, .md, .yaml)")],
        glossary_name: Annotated[str, Field(description="Name identifying the glossary")],
    ) -> str:
        """Load a glossary of historical terms, replacing any glossary with the same name.

        Document glossaries are read line by line as ``term: translation`` or
        ``term - translation``; other lines are ignored.
        """
        return _load_glossary_logic(session, file_path, glossary_name)

    @mcp.tool
    async def translate_text(
        ctx: Context,
        text: Annotated[str, Field(description="Early-modern English text to translate")],
        context: Annotated[str | None, Field(description="Historical or theological context of the text")] = None,
        use_glossaries: Annotated[
            list[str] | None,
            Field(description="Names of the glossaries to look terminology up in"),
        ] = None,
    ) -> str:
        """Prepare a text for translation into contemporary Spanish.

        Returns the glossary terminology found in the text. The translated
        text is currently the original text and always needs human review.
        """
        updates: list[tuple[float, float]] = []
        payload = _translate_text_logic(
            session,
            text,
            context=context,
            use_glossaries=use_glossaries,
            progress=lambda current, total: updates.append((current, total)),
        )

        await _forward_progress(ctx, updates)
        return payload

    @mcp.tool
    def search_terminology(
        term: Annotated[str, Field(description="Term to search for")],
        context_filter: Annotated[
            str | None,
            Field(description="Context filter (theological, historical, ...)"),
        ] = None,
    ) -> str:
        """Search every loaded glossary for a term in either language."""
        return _search_terminology_logic(session, term, context_filter)

    @mcp.resource(
        "glossaries://loaded",
        name="Loaded glossaries",
        description="All glossaries currently loaded, with entry counts",
        mime_type="application/json",
    )
    def loaded_glossaries() -> str:
        return _loaded_glossaries_resource(session)

    @mcp.resource(
        "stats://translation",
        name="Translation statistics",
        description="Usage statistics of the server",
        mime_type="application/json",
    )
    def translation_stats() -> str:
        return _translation_stats_resource(session)

    logger.debug("✅ All tools and resources registered")
    return mcp


def main() -> None:
    """Main entry point for the Historical Translation MCP Server."""
    env_loaded = load_dotenv()
    settings = Settings.from_env()

    logging.basicConfig(level=settings.log_level)
    if not env_loaded:
        logger.debug("No .env file found, using environment only")

    mcp = create_server(settings=settings)
    logger.info("📜 Historical translation server running on stdio")
    mcp.run()


if __name__ == "__main__":
    main()
