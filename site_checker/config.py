# === FILE: site_checker/config.py ===
"""
Configuration loading and validation for SiteChecker.
Pydantic describes the schema; YAML/JSON files provide defaults that the CLI
flags override.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Optional, Union
from urllib.parse import urlsplit

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator


class CheckOptions(BaseModel):
    """Flags passed to every check."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    seo: bool = Field(True, description="Run SEO checks.")
    accessibility: bool = Field(True, description="Run accessibility checks.")
    social_media: bool = Field(False, description="Check Open Graph / Twitter tags.")
    verbose: bool = Field(False, description="Print per-page findings.")


class CrawlConfig(BaseModel):
    """Configuration for one crawl run."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    base_url: str = Field(..., description="Site root to crawl.")
    max_concurrency: int = Field(15, description="Batch size (pages fetched in parallel).")
    max_depth: Optional[int] = Field(None, ge=1, description="Optional depth bound; unbounded by default.")
    max_pages: Optional[int] = Field(None, ge=1, description="Optional page bound; unbounded by default.")
    request_timeout: Optional[float] = Field(None, gt=0, description="Per-request timeout (seconds).")
    user_agent: str = Field("SiteChecker/0.1", min_length=1, description="User-Agent header.")
    options: CheckOptions = Field(default_factory=CheckOptions)
    report_path: Path = Field(Path("pages.json"), description="Where `check` writes its JSON report.")
    sitemap_path: Path = Field(Path("sitemap.xml"), description="Where `generate` writes the sitemap.")
    priority_decay: float = Field(0.8, gt=0, le=1, description="Sitemap priority decay per hop.")

    @field_validator("base_url", mode="before")
    def _normalize_base_url(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = v.strip()
            if not v.startswith("http"):
                v = f"https://{v}"
            if not urlsplit(v).hostname:
                raise ValueError(f"URL has no host: {v}")
            return v.rstrip("/")
        return v


_DEFAULT_CFG = Path("configs/default.yaml")


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of YAML must be a mapping, got {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of JSON must be a mapping, got {type(data).__name__}")
    return data


def read_config_file(path: Union[str, Path, None]) -> dict[str, Any]:
    """
    Read a YAML or JSON file into a plain mapping of defaults.
    With *path* None, `configs/default.yaml` is used when it exists, otherwise
    an empty mapping is returned.
    """
    if path is None:
        if not _DEFAULT_CFG.is_file():
            return {}
        path_obj = _DEFAULT_CFG
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        return _read_yaml(path_obj)
    if suffix == ".json":
        return _read_json(path_obj)
    raise ValueError(f"Unsupported config format: {suffix}")


def load_config(path: Union[str, Path, None], **overrides: Any) -> CrawlConfig:
    """
    Build a validated CrawlConfig from a config file plus keyword overrides.
    Overrides whose value is None are ignored; an `options` override is merged
    into the file's options instead of replacing them.
    """
    data = read_config_file(path)
    options = dict(data.pop("options", None) or {})
    options.update({k: v for k, v in (overrides.pop("options", None) or {}).items() if v is not None})
    data.update({k: v for k, v in overrides.items() if v is not None})
    return CrawlConfig(**data, options=CheckOptions(**options))
