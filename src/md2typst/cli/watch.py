"""Watch mode for the md2typst CLI.

Input files are monitored with watchdog and recompiled whenever they are
modified or recreated (editors that save atomically replace the file).
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Set

from md2typst.cli.processors import CjkFontWarner, InputSource, convert_input
from md2typst.constants import DEPS_WATCH
from md2typst.exceptions import Md2TypstError
from md2typst.options.pdf import PdfOptions
from md2typst.utils.decorators import requires_dependencies

logger = logging.getLogger(__name__)

WATCHED_EVENT_TYPES = ("modified", "created", "moved")


def _canonical(path: Path | str) -> Path:
    try:
        return Path(path).resolve()
    except OSError:
        return Path(path)


class MarkdownChangeHandler:
    """Recompile tracked Markdown files when watchdog reports a change.

    Watchdog observers only call ``dispatch`` on their handler, so this
    class routes events itself rather than subclassing watchdog's base
    handler.

    Parameters
    ----------
    paths : List[Path]
        Input files to rebuild
    options : PdfOptions
        Template selection and metadata overrides
    output : Path, optional
        The ``--output`` argument
    typst_only : bool, default False
        Write ``.typ`` source instead of compiling a PDF
    debounce_seconds : float, default 0.5
        Events for a file within this window after a rebuild are ignored
    verbose : bool, default False
        Print a line after each successful rebuild
    clock : callable, optional
        Time source, ``time.monotonic`` by default

    """

    def __init__(
        self,
        paths: List[Path],
        options: PdfOptions,
        output: Optional[Path] = None,
        typst_only: bool = False,
        debounce_seconds: float = 0.5,
        verbose: bool = False,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        """Initialize the handler with the files it tracks."""
        self.options = options
        self.output = output
        self.typst_only = typst_only
        self.debounce_seconds = debounce_seconds
        self.verbose = verbose
        self.multiple_inputs = len(paths) > 1
        self._clock = clock or time.monotonic
        self._warner = CjkFontWarner()

        # canonical path -> path as given on the command line
        self.tracked: Dict[Path, Path] = {_canonical(path): path for path in paths}

        self._last_built: Dict[Path, float] = {}
        self._building: Set[Path] = set()

    def dispatch(self, event: Any) -> None:
        """Route a watchdog event to a rebuild of the affected file."""
        if getattr(event, "is_directory", False):
            return
        if event.event_type not in WATCHED_EVENT_TYPES:
            return

        changed = event.dest_path if event.event_type == "moved" else event.src_path
        source_path = self.tracked.get(_canonical(changed))
        if source_path is None:
            return

        if self.should_rebuild(source_path):
            self.rebuild(source_path)

    def should_rebuild(self, source_path: Path) -> bool:
        key = _canonical(source_path)
        if key in self._building:
            logger.debug(f"Skipping {source_path}: already building")
            return False

        last_built = self._last_built.get(key)
        if last_built is not None and self._clock() - last_built < self.debounce_seconds:
            logger.debug(f"Skipping {source_path}: debounce delay not met")
            return False

        return True

    def rebuild(self, source_path: Path) -> bool:
        """Rebuild one file, logging failures instead of raising.

        Returns
        -------
        bool
            True when the output was written

        """
        key = _canonical(source_path)
        self._building.add(key)
        try:
            output_path = convert_input(
                InputSource(path=source_path),
                self.options,
                output=self.output,
                multiple_inputs=self.multiple_inputs,
                typst_only=self.typst_only,
                warner=self._warner,
            )
        except Md2TypstError as e:
            logger.error(f"[watch] failed: {e}")
            return False
        finally:
            self._last_built[key] = self._clock()
            self._building.discard(key)

        if self.verbose:
            print(f"[watch] updated {source_path} -> {output_path}")
        return True


@requires_dependencies("watch", DEPS_WATCH)
def run_watch_mode(
    paths: List[Path],
    options: PdfOptions,
    output: Optional[Path] = None,
    typst_only: bool = False,
    debounce: float = 0.5,
    verbose: bool = False,
) -> int:
    """Build every input once, then rebuild on change until interrupted.

    Parameters
    ----------
    paths : List[Path]
        Input Markdown files
    options : PdfOptions
        Template selection and metadata overrides
    output : Path, optional
        The ``--output`` argument
    typst_only : bool, default False
        Write ``.typ`` source instead of compiling a PDF
    debounce : float, default 0.5
        Debounce delay in seconds
    verbose : bool, default False
        Print a line after each rebuild

    Returns
    -------
    int
        Exit code (0 once stopped with Ctrl+C)

    """
    from watchdog.observers import Observer

    handler = MarkdownChangeHandler(
        paths,
        options,
        output=output,
        typst_only=typst_only,
        debounce_seconds=debounce,
        verbose=verbose,
    )

    for path in paths:
        handler.rebuild(path)

    observer = Observer()
    # watch parent directories so atomic saves (write + rename) are seen
    for directory in sorted({canonical.parent for canonical in handler.tracked}):
        observer.schedule(handler, str(directory), recursive=False)
    for canonical in handler.tracked:
        print(f"watching {canonical}")

    observer.start()
    print("Watch mode active. Press Ctrl+C to stop.")

    try:
        while True:
            time.sleep(1)
    except KeyboardInterrupt:
        print("\nStopping watch mode...")
        observer.stop()

    observer.join()
    logger.info("Watch mode stopped")
    return 0
