"""
템플릿 트리 구성 서비스

템플릿 루트 디렉토리를 한 번 순회하여 layouts/pages/partials
구조를 반영한 TemplateNode 트리를 만듭니다.
"""

import os
from pathlib import Path
from typing import Iterator, Tuple, Union

from ..errors import ErrorCode, handle_error
from ..models.template_node import TemplateNode, new_template_tree
from ...infrastructure.logging import get_logger

logger = get_logger(__name__, component="TreeBuilder")


def _raise_walk_error(error: OSError) -> None:
    """os.walk onerror 콜백: 순회 에러를 그대로 전파"""
    raise error


def _walk_entries(root_dir: Path) -> Iterator[Tuple[str, bool]]:
    """
    루트 아래 모든 엔트리를 깊이 우선으로 열거

    Yields:
        (루트 기준 상대 경로, 디렉토리 여부 - 심볼릭 링크는 False)
    """
    for dirpath, dirnames, filenames in os.walk(root_dir, onerror=_raise_walk_error):
        for name in dirnames:
            full_path = os.path.join(dirpath, name)
            # 디렉토리 심볼릭 링크는 따라가지 않고 파일 엔트리로 취급
            yield os.path.relpath(full_path, root_dir), not os.path.islink(full_path)
        for name in filenames:
            yield os.path.relpath(os.path.join(dirpath, name), root_dir), False


def build_template_tree(
    root_dir: Union[str, Path],
    include_empty_dirs: bool = False
) -> TemplateNode:
    """
    템플릿 디렉토리 트리 구성

    규칙:
    - 루트 노드에는 layouts, pages, partials 노드가 항상 존재
    - 필수 폴더가 아닌 최상위 폴더 아래 엔트리는 무시
    - 경로 중간 세그먼트만 노드로 생성되고, 마지막 세그먼트가
      파일이면 현재 노드의 files에 추가
    - 마지막 세그먼트가 디렉토리면 노드를 만들지 않음 (빈 디렉토리는
      트리에 나타나지 않음). include_empty_dirs=True면 모든 디렉토리를 노드로 생성
    - 디렉토리 심볼릭 링크는 따라가지 않고 files에 추가
    - 정렬하지 않음 (파일시스템 열거 순서 유지)

    Args:
        root_dir: 템플릿 루트 디렉토리
        include_empty_dirs: 하위 엔트리가 없는 디렉토리도 노드로 만들지 여부

    Returns:
        루트 TemplateNode

    Raises:
        FilesystemError: 디렉토리 순회 실패 시 (부분 트리는 반환하지 않음)
    """
    root_dir = Path(root_dir)
    root = new_template_tree(root_dir)

    try:
        for rel_path, is_dir in _walk_entries(root_dir):
            parts = rel_path.split(os.sep)
            if len(parts) == 1:
                continue  # 루트 바로 아래 엔트리

            current = root.children.get(parts[0])
            if current is None:
                continue  # 필수 폴더가 아님

            for part in parts[1:-1]:
                if part not in current.children:
                    current.children[part] = TemplateNode(
                        name=part, path=current.path / part
                    )
                current = current.children[part]

            last = parts[-1]
            if not is_dir:
                current.files.append(last)
            elif include_empty_dirs and last not in current.children:
                current.children[last] = TemplateNode(
                    name=last, path=current.path / last
                )

    except OSError as e:
        raise handle_error(
            ErrorCode.TREE_BUILD_FAILED,
            original_error=e,
            root_dir=str(root_dir),
        ) from e

    node_count, file_count = _count_entries(root)
    logger.debug(
        "Template tree built",
        root_dir=str(root_dir),
        nodes=node_count,
        files=file_count,
        include_empty_dirs=include_empty_dirs,
    )
    return root


def _count_entries(node: TemplateNode) -> Tuple[int, int]:
    """(노드 수, 파일 수) 집계"""
    nodes, files = 1, len(node.files)
    for child in node.children.values():
        child_nodes, child_files = _count_entries(child)
        nodes += child_nodes
        files += child_files
    return nodes, files
