"""
Default values for QuillCV document assembly.

Provides shared defaults used by:
- template_loader.py (default template id, shell naming, placeholder token)
- assembler.py (degenerate-record placeholder block)
- regional_layout.py (fallback wording)
"""

import os
from pathlib import Path
from typing import List

from dotenv import load_dotenv

load_dotenv()

PACKAGE_TEMPLATES_PATH = Path(__file__).resolve().parents[2] / "templates"

TEMPLATES_PATH = Path(os.getenv("QUILLCV_TEMPLATES_PATH") or PACKAGE_TEMPLATES_PATH)
DEFAULT_TEMPLATE_ID = os.getenv("QUILLCV_DEFAULT_TEMPLATE") or "template01"
LOGS_PATH = Path(os.getenv("LOGS_PATH") or "outs/logs")

# Token replaced by the rendered body; each shell contains it exactly once
CONTENT_PLACEHOLDER = "{{TEMPLATE_CONTENT}}"

# Shell file naming: {templates_path}/{id}/{id}{SHELL_SUFFIX}
SHELL_SUFFIX = "-standardized.tex"
CONFIG_SUFFIX = "-config.json"

# Command definitions injected into non-default shells
COMMAND_DEFINITIONS_NAME = "structure/command_definitions.tex"

# Template id rendered with the regional CV layout instead of the keyed macros
REGIONAL_TEMPLATE_ID = "basic_sa"

UNAVAILABLE = "Available upon request"
REGIONAL_DEFAULT_LOCATION = "South Africa"


def get_empty_document_block() -> List[str]:
    """
    Lines emitted when no section renders anything.

    Keeps the output a valid, non-trivial document for records that carry no
    usable data.
    """
    return [
        "% (intentionally left blank, no resume fields provided)",
        r"\begin{center}",
        r"  \Large Resume Data Not Provided",
        r"  \\ \vspace{1em}",
        r"  \small Please fill in your details to generate a preview.",
        r"\end{center}",
    ]
