"""
Template Loader

Resolves a template id to its LaTeX shell, with fallback to the default template
and in-memory caching.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

from jinja2 import Environment, FileSystemLoader, TemplateNotFound
from omegaconf import OmegaConf

from quillcv.contexts.templating.defaults import (
    CONFIG_SUFFIX,
    CONTENT_PLACEHOLDER,
    DEFAULT_TEMPLATE_ID,
    SHELL_SUFFIX,
    TEMPLATES_PATH,
)
from quillcv.contexts.templating.exceptions import TemplateLoadError
from quillcv.contexts.templating.logger import _log_debug, _log_warning


@dataclass(frozen=True)
class TemplateShell:
    """
    A loaded LaTeX shell.

    Attributes:
        template_id: Id the shell was loaded under (the default id after a fallback)
        source: Full shell text, containing the content placeholder once
        path: File the shell was read from
    """

    template_id: str
    source: str
    path: Path

    @property
    def has_placeholder(self) -> bool:
        return CONTENT_PLACEHOLDER in self.source


@dataclass(frozen=True)
class TemplateInfo:
    """Catalogue entry for one template directory."""

    id: str
    name: str
    description: str
    category: str = "professional"
    enabled: bool = True


def _template_sort_key(template_id: str) -> tuple:
    """Numbered templates first, by number (template2 before template10), then by name."""
    digits = "".join(char for char in template_id if char.isdigit())
    return (0, int(digits), template_id) if digits else (1, 0, template_id)


class TemplateLoader:
    """
    Loader and cache for template shells.

    Shells live at ``{templates_path}/{id}/{id}-standardized.tex``. Shell text is
    LaTeX, not Jinja: only the jinja2 FileSystemLoader is used, to resolve and
    read files (it also rejects ids that try to climb out of templates_path).

    The cache is owned by the instance and never invalidated while the process
    runs. Concurrent first loads of one id may both read the file; they store the
    same text, so no locking is needed.
    """

    def __init__(self, templates_path: Path = None, default_template_id: str = None):
        """
        Initialize the template loader.

        Args:
            templates_path: Directory holding one sub-directory per template.
                            Defaults to QUILLCV_TEMPLATES_PATH from environment
            default_template_id: Fallback template id. Defaults to
                                 QUILLCV_DEFAULT_TEMPLATE from environment
        """
        self.templates_path = Path(templates_path) if templates_path is not None else TEMPLATES_PATH
        self.default_template_id = default_template_id or DEFAULT_TEMPLATE_ID
        self._cache: Dict[str, TemplateShell] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_path), encoding="utf-8"),
            keep_trailing_newline=True,
        )

    def get_template_name(self, template_id: str) -> str:
        """Loader-relative name of a shell, e.g. ``template01/template01-standardized.tex``."""
        return f"{template_id}/{template_id}{SHELL_SUFFIX}"

    def get_template_path(self, template_id: str) -> Path:
        return self.templates_path / self.get_template_name(template_id)

    def _read(self, template_id: str) -> TemplateShell:
        source, filename, _ = self.env.loader.get_source(self.env, self.get_template_name(template_id))
        shell = TemplateShell(template_id=template_id, source=source, path=Path(filename))
        _log_debug(f"Loaded template {template_id} ({len(source)} chars) from {filename}")
        if not shell.has_placeholder:
            _log_warning(f"Template {template_id} has no {CONTENT_PLACEHOLDER} placeholder")
        return shell

    def read_source(self, name: str) -> str:
        """
        Read an auxiliary file under templates_path (e.g. shared command definitions).

        Raises:
            TemplateNotFound: If the file does not exist
        """
        source, _, _ = self.env.loader.get_source(self.env, name)
        return source

    def load(self, template_id: str) -> TemplateShell:
        """
        Get a template shell by id, loading and caching it if necessary.

        A missing or unreadable shell is logged and replaced by the default
        template. Failed loads are not cached, so they are retried (and logged)
        on every request.

        Args:
            template_id: Requested template id

        Returns:
            The requested shell, or the default shell after a fallback

        Raises:
            TemplateLoadError: If the default template itself cannot be loaded
        """
        if template_id in self._cache:
            return self._cache[template_id]

        try:
            shell = self._read(template_id)
        except (TemplateNotFound, OSError, UnicodeDecodeError) as e:
            if template_id == self.default_template_id:
                raise TemplateLoadError(
                    "Default template could not be loaded",
                    template_id=template_id,
                    template_path=self.get_template_path(template_id),
                    original_error=e,
                ) from e

            _log_warning(
                f"Template {template_id!r} not found or failed to load; "
                f"falling back to {self.default_template_id!r}"
            )
            return self.load(self.default_template_id)

        self._cache[template_id] = shell
        return shell

    def is_cached(self, template_id: str) -> bool:
        return template_id in self._cache

    def clear_cache(self):
        """Clear the shell cache."""
        self._cache.clear()

    def list_templates(self) -> List[TemplateInfo]:
        """
        Catalogue of available templates.

        Every sub-directory holding a shell is listed. Name, description,
        category and enabled flag come from ``{id}-config.json`` when present
        and readable, otherwise from defaults. If the templates directory
        itself cannot be read, only the default template is returned.

        Returns:
            TemplateInfo entries, numbered ids in numeric order
        """
        try:
            directories = [path for path in self.templates_path.iterdir() if path.is_dir()]
        except OSError as e:
            _log_warning(f"Cannot list templates in {self.templates_path}: {e}")
            return [
                TemplateInfo(
                    id=self.default_template_id,
                    name="Default Resume",
                    description="Default single-column resume template.",
                )
            ]

        templates = []
        for directory in directories:
            template_id = directory.name
            if not self.get_template_path(template_id).is_file():
                continue
            templates.append(self._template_info(template_id, directory / f"{template_id}{CONFIG_SUFFIX}"))

        return sorted(templates, key=lambda info: _template_sort_key(info.id))

    def _template_info(self, template_id: str, config_path: Path) -> TemplateInfo:
        config: Dict = {}
        if config_path.is_file():
            try:
                loaded = OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)
                config = loaded if isinstance(loaded, dict) else {}
            except Exception as e:
                _log_warning(f"Ignoring unreadable template config {config_path}: {e}")

        name: Optional[str] = config.get("templateName") or config.get("name")
        return TemplateInfo(
            id=template_id,
            name=name or f"Template {template_id.replace('template', '')}",
            description=config.get("description") or "Professional resume template.",
            category=config.get("category") or "professional",
            enabled=bool(config.get("enabled", True)),
        )
