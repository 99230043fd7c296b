"""Interviewer tools: @ai_function tools for the interviewer agent.

File tools work inside the context folder (read-only) and the memory folder
(read/write). Errors are returned to the model as ``"Error: ..."`` strings so
a bad path or regex never aborts the turn.
"""

import json
import logging
from typing import Any

from agent_framework import ai_function

from interview_room.config.settings import Settings
from interview_room.services.interview.documents import PdfReader
from interview_room.services.interview.workspace import ContextWorkspace, MemoryStore
from interview_room.services.verification.dispatcher import VerificationDispatcher
from interview_room.services.verification.tools import create_lookup_tools

logger = logging.getLogger(__name__)


def create_interview_tools(
    settings: Settings,
    dispatcher: VerificationDispatcher,
    workspace: ContextWorkspace | None = None,
    memory: MemoryStore | None = None,
    pdf_reader: PdfReader | None = None,
) -> list[Any]:
    """Create the interviewer's tool list."""
    workspace = workspace or ContextWorkspace(settings.context_dir)
    memory = memory or MemoryStore(settings.memory_dir)
    pdf_reader = pdf_reader or PdfReader(settings)

    # ------------------------------------------------------------------
    # Memory
    # ------------------------------------------------------------------

    @ai_function(name="memory")
    def memory_tool(
        command: str,
        path: str = "",
        file_text: str = "",
        old_str: str = "",
        new_str: str = "",
        insert_line: int = 1,
        insert_text: str = "",
        old_path: str = "",
        new_path: str = "",
        view_range: list[int] | None = None,
    ) -> str:
        """Persistent notes across turns. Commands:
        view(path, view_range?), create(path, file_text), str_replace(path, old_str, new_str),
        insert(path, insert_line, insert_text), delete(path), rename(old_path, new_path)."""
        arguments: dict[str, dict[str, Any]] = {
            "view": {"path": path, "view_range": view_range},
            "create": {"path": path, "file_text": file_text},
            "str_replace": {"path": path, "old_str": old_str, "new_str": new_str},
            "insert": {"path": path, "insert_line": insert_line, "insert_text": insert_text},
            "delete": {"path": path},
            "rename": {"old_path": old_path, "new_path": new_path},
        }
        try:
            return memory.execute(command, **arguments.get(command, {}))
        except Exception as e:
            return f"Error: {e}"

    # ------------------------------------------------------------------
    # Context exploration
    # ------------------------------------------------------------------

    @ai_function
    def file_search(pattern: str) -> str:
        """Search for files in the workspace by glob pattern. This only returns the paths of matching files.
        Glob patterns match from the root of the workspace folder. Examples:
        - **/*.md to match all markdown files in the workspace.
        - docs/** to match all files under the top-level docs folder."""
        try:
            return json.dumps(workspace.glob(pattern), ensure_ascii=False)
        except Exception as e:
            return f"Error: {e}"

    @ai_function
    def grep_search(query: str, before_context: int = 0, after_context: int = 0) -> str:
        """Do a text search in the workspace markdown files. Use this tool when you know the exact
        string you're searching for. The query may be a regex. before_context/after_context are the
        number of lines to include around each match."""
        try:
            files = workspace.grep(query, before_context, after_context)
            return json.dumps({"files": files}, ensure_ascii=False)
        except Exception as e:
            return f"Error: {e}"

    @ai_function
    def read_file(path: str, start_line: int | None = None, end_line: int | None = None) -> str:
        """Read the contents of a file. Specify the line range you're interested in; if omitted the
        whole file is returned. Call again to retrieve more content."""
        try:
            return workspace.read_file(path, start_line, end_line)
        except Exception as e:
            return f"Error: {e}"

    @ai_function
    def list_dir(path: str) -> str:
        """List the contents of a directory. If a name ends in /, it's a folder, otherwise a file."""
        try:
            return json.dumps(workspace.list_dir(path), ensure_ascii=False)
        except Exception as e:
            return f"Error: {e}"

    @ai_function
    async def read_pdf(path: str) -> str:
        """Read the contents of a PDF file, converted to markdown."""
        try:
            return await pdf_reader.to_markdown(workspace.read_bytes(path))
        except Exception as e:
            logger.warning("[PDF] %s failed: %s", path, e)
            return f"Error: {e}"

    # ------------------------------------------------------------------
    # Background verification + evaluation
    # ------------------------------------------------------------------

    @ai_function
    async def do_authenticity_verification_on_background(question: str) -> str:
        """Check the accuracy of the interviewee's answers or retrieve additional information behind
        the scenes. You get a unique id as output; the result will be returned after a few seconds
        as an 'Authenticity verification result' message with the same id."""
        return dispatcher.dispatch(question)

    @ai_function
    def evaluate_interview(interview_results: str) -> str:
        """Evaluate the interview and pass the interview results."""
        logger.info("[EVALUATION] Interview results: %s", interview_results)
        return interview_results

    return [
        memory_tool,
        file_search,
        grep_search,
        read_file,
        list_dir,
        read_pdf,
        do_authenticity_verification_on_background,
        evaluate_interview,
        *create_lookup_tools(settings),
    ]
