"""
설정 로더 구현

TemplateTreeConfig: 템플릿 루트, 베이스 템플릿 매핑, 렌더링/로깅 옵션
JsonConfigLoader: JSON 파일 + 환경변수에서 설정 로드
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

from dotenv import load_dotenv

from .env_utils import parse_bool_env, parse_str_env
from ...domain.errors import ErrorCode, handle_error
from ..logging import get_logger

logger = get_logger(__name__, component="ConfigLoader")

DEFAULT_CONFIG_FILE = "tmpltree.json"


@dataclass
class TemplateTreeConfig:
    """
    tmpltree 설정

    JSON 파일에서 로드되며 환경변수(TMPLTREE_*)로 덮어쓸 수 있습니다.
    """
    # 템플릿 설정
    root_dir: Path = Path("templates")
    base_templates: Dict[str, Path] = field(default_factory=dict)
    default_layout: Optional[str] = None
    include_empty_dirs: bool = False

    # 렌더링 설정
    autoescape: bool = True
    strict_undefined: bool = True

    # 로깅 설정
    log_level: str = "INFO"
    log_dir: Optional[str] = None
    enable_json_logs: bool = True

    def resolve_base_templates(self) -> Dict[str, Path]:
        """상대 경로인 베이스 템플릿을 root_dir 기준으로 변환"""
        return {
            name: path if Path(path).is_absolute() else self.root_dir / path
            for name, path in self.base_templates.items()
        }

    def apply_env_overrides(self) -> None:
        """TMPLTREE_* 환경변수로 설정 덮어쓰기"""
        root_dir = parse_str_env("TMPLTREE_ROOT_DIR", default=None)
        if root_dir:
            self.root_dir = Path(root_dir)

        self.log_level = parse_str_env("TMPLTREE_LOG_LEVEL", default=self.log_level).upper()
        self.default_layout = parse_str_env(
            "TMPLTREE_DEFAULT_LAYOUT", default=self.default_layout
        )
        self.include_empty_dirs = parse_bool_env(
            "TMPLTREE_INCLUDE_EMPTY_DIRS", default=self.include_empty_dirs
        )
        self.strict_undefined = parse_bool_env(
            "TMPLTREE_STRICT_UNDEFINED", default=self.strict_undefined
        )
        self.autoescape = parse_bool_env("TMPLTREE_AUTOESCAPE", default=self.autoescape)

    def to_dict(self) -> Dict[str, Any]:
        """JSON 직렬화용 딕셔너리 변환"""
        return {
            "templates": {
                "root_dir": str(self.root_dir),
                "base_templates": {
                    name: str(path) for name, path in self.base_templates.items()
                },
                "default_layout": self.default_layout,
                "include_empty_dirs": self.include_empty_dirs,
            },
            "rendering": {
                "autoescape": self.autoescape,
                "strict_undefined": self.strict_undefined,
            },
            "logging": {
                "level": self.log_level,
                "dir": self.log_dir,
                "enable_json": self.enable_json_logs,
            },
        }


class JsonConfigLoader:
    """
    JSON 설정 로더

    설정 파일 구조:
        {
            "templates": {"root_dir": "...", "base_templates": {"base": "layouts/base.html"}},
            "rendering": {"autoescape": true, "strict_undefined": true},
            "logging": {"level": "INFO", "dir": null, "enable_json": true}
        }

    상대 경로 root_dir은 설정 파일이 있는 디렉토리 기준입니다.
    """

    def __init__(self, config_path: Union[str, Path]):
        """
        Args:
            config_path: 설정 파일 경로
        """
        self.config_path = Path(config_path)

    def load(self) -> TemplateTreeConfig:
        """
        설정 로드

        Returns:
            TemplateTreeConfig (파일이 없으면 기본값)

        Raises:
            ConfigError: 파일을 읽을 수 없거나 형식이 잘못된 경우
        """
        if not self.config_path.exists():
            logger.warning("Config file not found, using defaults", config_path=str(self.config_path))
            return TemplateTreeConfig()

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise handle_error(
                ErrorCode.CONFIG_INVALID,
                original_error=e,
                file_path=str(self.config_path),
            ) from e
        except OSError as e:
            raise handle_error(
                ErrorCode.CONFIG_LOAD_FAILED,
                original_error=e,
                file_path=str(self.config_path),
            ) from e

        if not isinstance(data, dict):
            raise handle_error(
                ErrorCode.CONFIG_INVALID,
                file_path=str(self.config_path),
                error="최상위 값은 객체여야 합니다",
            )

        config = self._from_dict(data)
        logger.info("Config loaded", config_path=str(self.config_path))
        return config

    def _from_dict(self, data: Dict[str, Any]) -> TemplateTreeConfig:
        templates = self._section(data, "templates")
        rendering = self._section(data, "rendering")
        logging_config = self._section(data, "logging")
        base_templates = self._section(templates, "base_templates")

        root_dir = Path(templates.get("root_dir", "templates"))
        if not root_dir.is_absolute():
            root_dir = self.config_path.parent / root_dir

        return TemplateTreeConfig(
            root_dir=root_dir,
            base_templates={name: Path(path) for name, path in base_templates.items()},
            default_layout=templates.get("default_layout"),
            include_empty_dirs=templates.get("include_empty_dirs", False),
            autoescape=rendering.get("autoescape", True),
            strict_undefined=rendering.get("strict_undefined", True),
            log_level=logging_config.get("level", "INFO"),
            log_dir=logging_config.get("dir"),
            enable_json_logs=logging_config.get("enable_json", True),
        )

    def _section(self, data: Dict[str, Any], key: str) -> Dict[str, Any]:
        """객체여야 하는 설정 섹션 조회 (없으면 빈 dict)"""
        section = data.get(key, {})
        if not isinstance(section, dict):
            raise handle_error(
                ErrorCode.CONFIG_INVALID,
                file_path=str(self.config_path),
                error=f"'{key}'는 객체여야 합니다",
            )
        return section


def load_config(config_path: Optional[Union[str, Path]] = None) -> TemplateTreeConfig:
    """
    설정 로드 (JSON 파일 → .env → 환경변수 순으로 적용)

    Args:
        config_path: 설정 파일 경로 (기본: 현재 디렉토리의 tmpltree.json, 없으면 기본값 사용)

    Returns:
        TemplateTreeConfig
    """
    cwd_dotenv = Path.cwd() / ".env"
    if cwd_dotenv.exists():
        load_dotenv(dotenv_path=cwd_dotenv)
        logger.debug("Loaded .env", dotenv_path=str(cwd_dotenv))

    if config_path is None:
        config_path = Path.cwd() / DEFAULT_CONFIG_FILE
        if not config_path.exists():
            config_path = None

    config = JsonConfigLoader(config_path).load() if config_path else TemplateTreeConfig()
    config.apply_env_overrides()
    return config
