"""Structured output for CLI and JSON modes."""

# ruff: noqa: T201 -- this module is the output layer; print() is its sole mechanism for producing CLI output.

import json
import sys
from pathlib import Path
from typing import NoReturn

import typer

from clarety.conversation.models import WorkspaceCollection
from clarety.personality import Profile
from clarety.pipeline import Speaker, Turn, VoiceReply
from clarety.watson.errors import WatsonError


class Output:
    """Handles all CLI output in JSON or human-readable format."""

    def __init__(self, *, json_mode: bool) -> None:
        """Initialize output handler.

        Args:
            json_mode: If True, output JSON envelopes; otherwise human-readable text.

        """
        self._json_mode = json_mode

    def _success(self, data: dict[str, object], message: str) -> None:
        """Print a success result in JSON or human-readable format."""
        if self._json_mode:
            print(json.dumps({"ok": True, "data": data}))
        else:
            print(message)

    def print_error_and_exit(self, code: str, message: str, *, status: int | None = None) -> NoReturn:
        """Print an error in JSON or human-readable format and exit with code 1.

        Raises:
            typer.Exit: Always, with code 1.

        """
        if self._json_mode:
            payload: dict[str, object] = {"ok": False, "error": code, "message": message}
            if status is not None:
                payload["status"] = status
            print(json.dumps(payload))
        else:
            print(f"Error: {message}", file=sys.stderr)
        raise typer.Exit(code=1)

    def print_watson_error_and_exit(self, error: WatsonError | None) -> NoReturn:
        """Print a failed Result's error and exit with code 1."""
        if error is None:
            self.print_error_and_exit("internal", "Operation failed without an error.")
        self.print_error_and_exit(error.code, str(error), status=error.status)

    # --- Chat ---

    def print_turns(self, turns: list[Turn]) -> None:
        """Print chat transcript lines."""
        if self._json_mode:
            print(json.dumps({"ok": True, "data": {"turns": [{"speaker": t.speaker.value, "text": t.text} for t in turns]}}))
        else:
            for turn in turns:
                print(f"{turn.speaker.display_name}: {turn.text}")

    def print_voice_reply(self, reply: VoiceReply, audio_path: Path) -> None:
        """Print a completed voice turn."""
        self._success(
            {"transcript": reply.transcript, "reply": reply.reply, "audio": str(audio_path)},
            f"{Speaker.ME.display_name}: {reply.transcript}\n{Speaker.WATSON.display_name}: {reply.reply}\nAudio saved to {audio_path}.",
        )

    def print_transcript(self, text: str) -> None:
        """Print a transcription."""
        self._success({"transcript": text}, text)

    def print_audio_saved(self, path: Path, size: int) -> None:
        """Print synthesized audio confirmation."""
        self._success({"path": str(path), "bytes": size}, f"Audio saved to {path} ({size} bytes).")

    # --- Workspaces / personality ---

    def print_workspaces(self, collection: WorkspaceCollection) -> None:
        """Print a page of workspaces."""
        lines = [f"{ws.workspace_id}  {ws.name} ({ws.language})" for ws in collection.workspaces]
        if collection.next_cursor:
            lines.append(f"Next page: --cursor {collection.next_cursor}")
        self._success(collection.model_dump(mode="json", exclude_none=True), "\n".join(lines) or "No workspaces.")

    def print_profile(self, profile: Profile) -> None:
        """Print Big Five percentiles."""
        scores = profile.big_five()
        lines = [f"{name}: {percentile:.0%}" for name, percentile in scores.items()]
        self._success({"word_count": profile.word_count, "big_five": scores}, "\n".join(lines))
