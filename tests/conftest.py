"""Shared fixtures for QuillCV tests."""

from pathlib import Path

import pytest
from loguru import logger

from quillcv.contexts.templating.template_loader import TemplateLoader

FIXTURES_PATH = Path(__file__).parent / "fixtures"

MINIMAL_DEFAULT_SHELL = r"""\documentclass{article}
\newcommand{\defaultshellmarker}{}
\begin{document}
{{TEMPLATE_CONTENT}}
\end{document}
"""

MINIMAL_PLAIN_SHELL = r"""\documentclass[11pt]{article}
\begin{document}
{{TEMPLATE_CONTENT}}
\end{document}
"""

MINIMAL_DEFINITIONS = r"""\ifx\introduction\undefined
  \usepackage{keycommand}
\fi
"""


@pytest.fixture
def log_messages():
    """Collect WARNING-and-above loguru messages emitted during a test."""
    messages = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="WARNING")
    yield messages
    logger.remove(handler_id)


def write_shell(templates_dir: Path, template_id: str, source: str) -> Path:
    shell_dir = templates_dir / template_id
    shell_dir.mkdir(parents=True, exist_ok=True)
    shell_path = shell_dir / f"{template_id}-standardized.tex"
    shell_path.write_text(source, encoding="utf-8")
    return shell_path


@pytest.fixture
def templates_dir(tmp_path):
    """
    Temporary templates directory with:
    - template01: default shell
    - template02: shell without keyed command definitions
    - no_placeholder: shell missing the content placeholder
    - structure/command_definitions.tex
    """
    root = tmp_path / "templates"
    write_shell(root, "template01", MINIMAL_DEFAULT_SHELL)
    write_shell(root, "template02", MINIMAL_PLAIN_SHELL)
    write_shell(root, "no_placeholder", "\\documentclass{article}\n\\begin{document}\n\\end{document}\n")

    structure = root / "structure"
    structure.mkdir()
    (structure / "command_definitions.tex").write_text(MINIMAL_DEFINITIONS, encoding="utf-8")
    return root


@pytest.fixture
def loader(templates_dir):
    return TemplateLoader(templates_path=templates_dir, default_template_id="template01")


@pytest.fixture
def shell_writer():
    """Helper for tests that add shells to a templates directory."""
    return write_shell
