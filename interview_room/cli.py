"""Command line entry point: run the API server or a terminal interview client."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

import httpx
import uvicorn

from interview_room.client.coordinator import PushToTalkCoordinator
from interview_room.client.directives import parse_agent_directives
from interview_room.client.session import ChatSession, SpeechClient, TranscriptionClient
from interview_room.config.constants import ConversationStatus
from interview_room.infrastructure.logging.logger import setup_logging

logger = logging.getLogger(__name__)

AUDIO_COMMAND = "/audio "
QUIT_COMMANDS = {"/quit", "/exit"}


class FileRecorder:
    """Recorder stand-in that "captures" a pre-recorded audio file."""

    def __init__(self) -> None:
        self.path: Path | None = None

    def start(self) -> None:
        pass

    async def stop(self) -> bytes | None:
        if self.path is None or not self.path.exists():
            return None
        return self.path.read_bytes()


async def _run_chat(base_url: str, speech_dir: Path | None) -> None:
    async with httpx.AsyncClient(base_url=base_url, timeout=None) as client:
        session = ChatSession(client)
        speech_client = SpeechClient(client)
        recorder = FileRecorder()
        turns: set[asyncio.Task] = set()

        async def send(text: str) -> None:
            # Turns run in the background so typing can continue while streaming
            task = asyncio.create_task(session.send_message(text))
            turns.add(task)
            task.add_done_callback(turns.discard)

        coordinator = PushToTalkCoordinator(
            recorder=recorder,
            transcribe=TranscriptionClient(client),
            send=send,
        )
        session.add_status_listener(coordinator.on_status_change)

        async def print_chunk(chunk: str) -> None:
            sys.stdout.write(chunk)
            sys.stdout.flush()

        async def show_directives(status: ConversationStatus) -> None:
            if status != ConversationStatus.READY or not session.messages:
                return
            directives = parse_agent_directives(session.messages[-1].text)
            print()
            if directives.screen:
                print(f"\n[whiteboard]\n{directives.screen}\n")
            if directives.speech and speech_dir is not None:
                try:
                    audio = await speech_client.synthesize(directives.speech, directives.instructions)
                except httpx.HTTPError as e:
                    logger.error("Speech synthesis failed: %s", e)
                    return
                speech_dir.mkdir(parents=True, exist_ok=True)
                target = speech_dir / f"turn-{len(session.messages):03d}.mp3"
                target.write_bytes(audio)
                print(f"[speech saved to {target}]")

        session.add_chunk_listener(print_chunk)
        session.add_status_listener(show_directives)

        print("Type your answers. '/audio <file>' sends a recording, '/quit' exits.")
        while True:
            line = (await asyncio.to_thread(input, "> ")).strip()
            if line in QUIT_COMMANDS:
                break
            if line.startswith(AUDIO_COMMAND):
                recorder.path = Path(line[len(AUDIO_COMMAND):].strip())
                if coordinator.press():
                    await coordinator.release()
                continue
            await coordinator.handle_transcript(line)

        if turns:
            await asyncio.gather(*turns, return_exceptions=True)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="interview-room", description="Mock interview room")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the API server")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)
    serve.add_argument("--reload", action="store_true")

    chat = subparsers.add_parser("chat", help="Terminal interview client")
    chat.add_argument("--base-url", default="http://127.0.0.1:8000")
    chat.add_argument("--speech-dir", type=Path, default=None, help="Save interviewer speech as mp3 here")
    chat.add_argument("--log-level", default="WARNING")

    args = parser.parse_args(argv)

    if args.command == "serve":
        uvicorn.run("interview_room.app:app", host=args.host, port=args.port, reload=args.reload)
        return

    setup_logging(level=args.log_level.upper(), json_output=False)
    try:
        asyncio.run(_run_chat(args.base_url, args.speech_dir))
    except (KeyboardInterrupt, EOFError):
        pass


if __name__ == "__main__":
    main()
