"""
템플릿 트리 도메인 모델

TemplateNode: 템플릿 디렉토리 하나를 나타내는 트리 노드
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Any, TextIO

logger = logging.getLogger(__name__)

# 트리 루트에 항상 존재하는 최상위 폴더
REQUIRED_FOLDERS = ("layouts", "pages", "partials")

ROOT_NODE_NAME = "templates"


@dataclass
class TemplateNode:
    """
    템플릿 트리 노드

    디렉토리 하나를 나타내며, 하위 디렉토리 노드와
    해당 디렉토리에 직접 들어 있는 파일 이름 목록을 가집니다.

    Attributes:
        name: 디렉토리 이름
        path: 이 노드가 나타내는 파일시스템 경로
        children: 하위 디렉토리 이름 → 노드 (순회 순서 보장 없음)
        files: 디렉토리에 직접 들어 있는 파일 이름 (파일시스템 열거 순서, 정렬하지 않음)
    """
    name: str
    path: Path
    children: Dict[str, "TemplateNode"] = field(default_factory=dict)
    files: List[str] = field(default_factory=list)

    def __post_init__(self):
        self.path = Path(self.path)

    def get_node(self, *path: str) -> Optional["TemplateNode"]:
        """
        경로 세그먼트를 따라 하위 노드 조회

        Args:
            *path: 하위 디렉토리 이름 세그먼트

        Returns:
            도달한 노드, 세그먼트 하나라도 없으면 None
            (세그먼트가 없으면 자기 자신)
        """
        current = self
        for part in path:
            child = current.children.get(part)
            if child is None:
                return None
            current = child
        return current

    def has_file(self, file_name: str) -> bool:
        """디렉토리에 파일이 있는지 확인 (files 선형 탐색)"""
        for name in self.files:
            if name == file_name:
                return True
        return False

    def print(self, writer: TextIO, indent: str = "") -> None:
        """
        트리 구조를 writer에 출력 (디버그용)

        이름 뒤에 "/"를 붙여 출력한 뒤, 파일을 한 단계 들여쓰고,
        하위 노드를 한 단계 더 들여써서 재귀 출력합니다.
        쓰기 실패는 로그만 남기고 해당 호출의 나머지 출력을 중단합니다.

        Args:
            writer: 출력 대상 (write() 메서드를 가진 텍스트 스트림)
            indent: 현재 들여쓰기 접두어
        """
        self._print(writer, indent)

    def _print(self, writer: TextIO, indent: str) -> bool:
        try:
            writer.write(f"{indent}{self.name}/\n")
            for file_name in self.files:
                writer.write(f"{indent}  {file_name}\n")
        except (OSError, ValueError, TypeError) as e:
            logger.warning(f"템플릿 트리 출력 실패 ({self.name}): {e}")
            return False

        for child in self.children.values():
            if not child._print(writer, indent + "  "):
                return False
        return True

    def to_dict(self) -> Dict[str, Any]:
        """JSON 직렬화용 딕셔너리 변환"""
        return {
            "name": self.name,
            "path": str(self.path),
            "files": list(self.files),
            "children": {
                name: child.to_dict() for name, child in self.children.items()
            },
        }


def new_template_tree(root_dir: Path) -> TemplateNode:
    """
    필수 폴더 3개가 미리 채워진 루트 노드 생성

    디스크에 폴더가 없거나 비어 있어도 layouts, pages, partials
    노드는 항상 존재하며 조회할 수 있습니다.

    Args:
        root_dir: 템플릿 루트 디렉토리

    Returns:
        루트 TemplateNode
    """
    root = TemplateNode(name=ROOT_NODE_NAME, path=Path(root_dir))
    for folder in REQUIRED_FOLDERS:
        root.children[folder] = TemplateNode(name=folder, path=root.path / folder)
    return root
