from __future__ import annotations
import argparse
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Set

from watchdog.events import FileSystemEventHandler
from watchdog.observers import Observer

from .card_parser import MalformedInputError
from .scoring_engine import ScoreOutput, ScoringEngine, score_file


def _print_report(path: Path, out: ScoreOutput) -> None:
    print()
    print(f"Card file: {path.name}")
    print(f"Cards: {len(out.cards)}")
    for line in out.report_lines():
        print(line)
    for n in out.notes:
        print(f"Note: {n}")


@dataclass
class App:
    engine: ScoringEngine
    settle_delay: float = 0.10

    def handle_file(self, path: Path) -> ScoreOutput | None:
        # small delay to avoid partial writes
        if self.settle_delay > 0:
            time.sleep(self.settle_delay)
        try:
            out = score_file(path, self.engine)
        except (OSError, UnicodeDecodeError, MalformedInputError) as exc:
            print(f"\nCard file: {path.name}")
            print(f"error: {exc}")
            return None
        _print_report(path, out)
        return out


class CardFileHandler(FileSystemEventHandler):
    def __init__(self, app: App, exts: Set[str]) -> None:
        self.app = app
        self.exts = exts

    def _dispatch_path(self, raw: str) -> None:
        if not raw:
            return
        p = Path(raw)
        if p.suffix.lower() not in self.exts:
            return
        self.app.handle_file(p)

    def on_created(self, event):  # type: ignore[override]
        if event.is_directory:
            return
        self._dispatch_path(event.src_path)

    def on_modified(self, event):  # type: ignore[override]
        if event.is_directory:
            return
        self._dispatch_path(event.src_path)

    def on_moved(self, event):  # type: ignore[override]
        if event.is_directory:
            return
        self._dispatch_path(getattr(event, "dest_path", ""))


def main() -> None:
    parser = argparse.ArgumentParser(description="Watch a folder and score scratch card files as they appear or change.")
    parser.add_argument("--watch", required=True, help="Folder to watch for card files.")
    parser.add_argument("--ext", action="append", default=None, help="Allowed file extensions (repeatable, default: .txt).")

    args = parser.parse_args()
    watch_dir = Path(args.watch).expanduser()

    if not watch_dir.exists():
        raise SystemExit(f"Watch dir does not exist: {watch_dir}")

    app = App(engine=ScoringEngine())
    exts = {e.lower() if e.startswith(".") else f".{e.lower()}" for e in (args.ext or [".txt"])}
    handler = CardFileHandler(app, exts)
    observer = Observer()
    observer.schedule(handler, str(watch_dir), recursive=False)

    print(f"Watching: {watch_dir}")
    print(f"Extensions: {', '.join(sorted(exts))}")
    print("Waiting for card files...")

    observer.start()
    try:
        while True:
            time.sleep(0.5)
    except KeyboardInterrupt:
        pass
    finally:
        observer.stop()
        observer.join()
