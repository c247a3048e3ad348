"""
템플릿 트리 CLI 명령어

템플릿 디렉토리 트리 출력, 페이지 렌더링 CLI 명령어를 제공합니다.
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from ...application.use_cases import DefaultTemplateManagerFactory, new_template_manager
from ...domain.errors import TemplateTreeError
from ...domain.models import TemplateNode
from ...domain.services import build_template_tree
from ...infrastructure.config import TemplateTreeConfig, load_config
from ...infrastructure.logging import configure_structlog
from ...infrastructure.template import Jinja2TemplateEngine

console = Console()
err_console = Console(stderr=True)


def _build_rich_tree(node: TemplateNode, tree: Optional[Tree] = None) -> Tree:
    """TemplateNode를 rich Tree로 변환"""
    label = f"[bold blue]{escape(node.name)}/[/bold blue]"
    branch = Tree(label) if tree is None else tree.add(label)
    for file_name in node.files:
        branch.add(escape(file_name))
    for child in node.children.values():
        _build_rich_tree(child, branch)
    return branch


def _parse_base_templates(values: tuple) -> Dict[str, Path]:
    """--base NAME=PATH 옵션 파싱"""
    base_templates = {}
    for value in values:
        if "=" not in value:
            raise click.BadParameter(
                f"잘못된 베이스 템플릿 형식: {value} (NAME=PATH 형식이어야 합니다)",
                param_hint="--base",
            )
        name, path = value.split("=", 1)
        base_templates[name.strip()] = Path(path.strip())
    return base_templates


def _load_data(data: Optional[str], data_file: Optional[str]) -> Any:
    """--data / --data-file 옵션에서 템플릿 데이터 로드"""
    if data and data_file:
        raise click.UsageError("--data와 --data-file은 함께 사용할 수 없습니다")

    try:
        if data_file:
            with open(data_file, "r", encoding="utf-8") as f:
                return json.load(f)
        if data:
            return json.loads(data)
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"JSON 파싱 실패: {e}", param_hint="--data")
    return None


@click.group(name="tmpltree")
@click.option("--config", "config_path", type=click.Path(dir_okay=False), help="설정 파일 경로 (기본값: ./tmpltree.json)")
@click.option("--log-level", default=None, help="로그 레벨 (DEBUG, INFO, WARNING, ERROR)")
@click.option("--log-dir", default=None, type=click.Path(file_okay=False), help="로그 디렉토리")
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[str], log_level: Optional[str], log_dir: Optional[str]):
    """템플릿 트리 색인 및 렌더링 명령어"""
    try:
        config = load_config(config_path)
    except TemplateTreeError as e:
        err_console.print(f"[red]{escape(str(e))}[/red]")
        raise click.Abort()

    if log_level:
        config.log_level = log_level.upper()
    if log_dir:
        config.log_dir = log_dir

    configure_structlog(
        log_dir=config.log_dir,
        log_level=config.log_level,
        enable_json=config.enable_json_logs,
    )
    ctx.obj = config


@cli.command(name="tree")
@click.argument("root_dir", required=False, type=click.Path(file_okay=False))
@click.option("--include-empty-dirs", is_flag=True, help="빈 디렉토리도 노드로 표시")
@click.option("--plain", is_flag=True, help="들여쓰기 텍스트로 출력")
@click.pass_obj
def show_tree(config: TemplateTreeConfig, root_dir: Optional[str], include_empty_dirs: bool, plain: bool):
    """
    템플릿 트리 출력

    Examples:
        tmpltree tree templates/
        tmpltree tree templates/ --plain
    """
    root_path = Path(root_dir) if root_dir else config.root_dir
    include_empty_dirs = include_empty_dirs or config.include_empty_dirs

    try:
        root = build_template_tree(root_path, include_empty_dirs=include_empty_dirs)
    except TemplateTreeError as e:
        err_console.print(f"[red]{escape(str(e))}[/red]")
        raise click.Abort()

    if plain:
        root.print(click.get_text_stream("stdout"))
    else:
        console.print(_build_rich_tree(root))


@cli.command(name="render")
@click.argument("template_path")
@click.option("--root", "root_dir", type=click.Path(file_okay=False), help="템플릿 루트 디렉토리")
@click.option("--base", "-b", "bases", multiple=True, help="베이스 템플릿 (NAME=PATH 형식, 여러 개 지정 가능)")
@click.option("--layout", "-l", default=None, help="사용할 베이스 템플릿 이름")
@click.option("--data", "-d", default=None, help="템플릿 데이터 (JSON 문자열)")
@click.option("--data-file", default=None, type=click.Path(exists=True, dir_okay=False), help="템플릿 데이터 JSON 파일")
@click.option("--output", "-o", default=None, type=click.Path(dir_okay=False), help="출력 파일 (기본값: 표준 출력)")
@click.pass_obj
def render_template(
    config: TemplateTreeConfig,
    template_path: str,
    root_dir: Optional[str],
    bases: tuple,
    layout: Optional[str],
    data: Optional[str],
    data_file: Optional[str],
    output: Optional[str]
):
    """
    페이지 템플릿 렌더링

    Examples:
        tmpltree render pages/index --root templates -b base=templates/layouts/base.html -l base
        tmpltree render pages/users/index -l admin -d '{"name": "World"}' -o index.html
    """
    if root_dir:
        config.root_dir = Path(root_dir)

    base_templates = config.resolve_base_templates()
    base_templates.update(_parse_base_templates(bases))

    layout = layout or config.default_layout
    if not layout:
        if len(base_templates) != 1:
            raise click.UsageError("--layout으로 사용할 베이스 템플릿을 지정하세요")
        layout = next(iter(base_templates))

    template_data = _load_data(data, data_file)

    factory = DefaultTemplateManagerFactory(
        template_engine=Jinja2TemplateEngine(
            autoescape=config.autoescape,
            strict_undefined=config.strict_undefined,
        ),
        include_empty_dirs=config.include_empty_dirs,
    )

    try:
        manager = new_template_manager(config.root_dir, base_templates, factory=factory)
        rendered = manager.render_to_string(template_path, layout, template_data)
    except TemplateTreeError as e:
        err_console.print(f"[red]렌더링 실패: {escape(str(e))}[/red]")
        raise click.Abort()

    if output:
        Path(output).write_text(rendered, encoding="utf-8")
        err_console.print(f"[green]✓ 렌더링 완료: {escape(output)}[/green]")
    else:
        click.echo(rendered, nl=False)


def main():
    """CLI 진입점"""
    cli()


if __name__ == "__main__":
    main()
