'''
Places a rendered graph document can be written to.

A sink exposes `write(name, text)` and returns where the text ended up.
Any failure is reported as GraphWriteError, whatever the cause.
'''

import logging
import subprocess
from pathlib import Path
from typing import Dict, Optional, Union

import graphviz

logger = logging.getLogger(__name__)


class GraphWriteError(OSError):
    """The rendered graph document could not be persisted."""

    def __init__(self, message="Failed to write graph document"):
        super().__init__(message)


class FileSink:
    """
    Saves each document as `<directory>/<name><suffix>`.

    With `render_format` set (e.g. "png") the document is also laid out by
    the Graphviz `dot` executable and written as `<name>.<format>`.
    """

    def __init__(self, directory: Union[str, Path] = ".", suffix: str = ".gv.txt",
                 render_format: Optional[str] = None):
        if render_format and not suffix:
            # the image render writes its own temporary source at <name>
            raise ValueError("suffix must not be empty when render_format is set")
        self.directory = Path(directory)
        self.suffix = suffix
        self.render_format = render_format

    def write(self, name: str, text: str) -> Path:
        stem = name or "graph"
        if "/" in stem or "\\" in stem or stem in (".", ".."):
            logger.error("Refusing graph name %r: not a plain file name", stem)
            raise GraphWriteError()
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            source = graphviz.Source(text, filename=f"{stem}{self.suffix}",
                                     directory=str(self.directory), encoding="utf-8")
            filepath = Path(source.save())
            if self.render_format:
                image = graphviz.Source(text, format=self.render_format)
                image.render(filename=stem, directory=str(self.directory), cleanup=True)
        except (OSError, graphviz.ExecutableNotFound, subprocess.CalledProcessError) as e:
            logger.exception("Could not write graph %r to %s", stem, self.directory)
            raise GraphWriteError() from e
        logger.info("Graph %r saved to %s", stem, filepath)
        return filepath


class MemorySink:
    # keeps documents in memory, keyed by name; last write wins
    def __init__(self):
        self.documents: Dict[str, str] = {}

    def write(self, name: str, text: str) -> str:
        self.documents[name] = text
        return name
