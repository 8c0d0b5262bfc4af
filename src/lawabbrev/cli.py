import typer
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from .config import DEFAULT_INDEX_FILE, LOG_FORMAT

logger = logging.getLogger(__name__)

app = typer.Typer(add_completion=False)


def _setup_logging(verbose: bool):
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format=LOG_FORMAT)


def _load_targets(path: Path) -> List[str]:
    import yaml

    if not path.exists():
        return []
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
        if isinstance(data, list):
            return [str(t) for t in data]
        if isinstance(data, dict) and "targets" in data:
            return [str(t) for t in data["targets"]]
        return []


def _load_index(work: Path, index_file: Optional[Path]) -> List[Dict[str, Any]]:
    """
    作業ディレクトリのインデックスを読み込む

    インデックスが無い場合は作業ディレクトリ内の *.xml を全て対象にする
    （法令番号は XML の LawNum から取得）。
    """
    path = index_file or work / DEFAULT_INDEX_FILE
    if path.exists():
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    return [{"file": p.name} for p in sorted(work.glob("*.xml"))]


def _write_json(path: Path, data: Any):
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)


@app.command()
def fetch(
    targets: Path = typer.Option(..., help="Path to targets.yaml (e-Gov law ids)"),
    work: Path = typer.Option(..., help="Work directory to store law XML files"),
    index_file: Optional[Path] = typer.Option(None, help="Index JSON to write (default: <work>/index.json)"),
    verbose: bool = typer.Option(False, help="Enable debug logging"),
):
    """
    Download law XML from e-Gov and write the work directory index.
    """
    from tqdm import tqdm
    from .client.egov import EGovClient
    from .core.fragments import get_law_num, parse_law_xml

    _setup_logging(verbose)
    law_ids = _load_targets(targets)
    if not law_ids:
        raise typer.BadParameter(f"No targets found in {targets}")

    work.mkdir(parents=True, exist_ok=True)
    client = EGovClient()
    index = []
    failed = []

    for law_id in tqdm(law_ids, desc="Fetching Laws"):
        try:
            xml_content = client.fetch_law_xml(law_id)
            law_num = get_law_num(parse_law_xml(xml_content))
        except Exception as e:
            logger.error(f"Failed to fetch {law_id}: {e}")
            failed.append(law_id)
            continue
        file_name = f"{law_id}.xml"
        (work / file_name).write_text(xml_content, encoding="utf-8")
        index.append({"law_id": law_id, "law_num": law_num, "file": file_name})

    _write_json(index_file or work / DEFAULT_INDEX_FILE, index)
    typer.echo(f"Fetched {len(index)} law(s), {len(failed)} failed.")


@app.command()
def extract(
    work: Path = typer.Option(..., help="Work directory containing law XML files"),
    output: Path = typer.Option(..., help="JSON file to write extracted abbreviations"),
    error_output: Path = typer.Option(..., help="JSON file to write failed fragments and laws"),
    index_file: Optional[Path] = typer.Option(None, help="Index JSON (default: <work>/index.json)"),
    generic: bool = typer.Option(False, help="Also extract abbreviations without a law number"),
    verbose: bool = typer.Option(False, help="Enable debug logging"),
):
    """
    Extract abbreviation definitions from law XML files.

    Output is a mapping from law number to its abbreviation records.
    """
    import xml.etree.ElementTree as ET
    from tqdm import tqdm
    from .core.driver import collect_law_abbreviations

    _setup_logging(verbose)
    entries = _load_index(work, index_file)

    results: Dict[str, List[Dict[str, Any]]] = {}
    errors: List[Dict[str, Any]] = []

    for entry in tqdm(entries, desc="Extracting"):
        xml_path = work / entry["file"]
        try:
            result = collect_law_abbreviations(
                xml_path.read_bytes(), law_num=entry.get("law_num"), generic=generic
            )
        except (OSError, ET.ParseError, ValueError) as e:
            logger.error(f"Failed to process {xml_path}: {e}")
            errors.append({"file": entry["file"], "law_num": entry.get("law_num"), "error": str(e)})
            continue

        records = result.records()
        if records:
            results.setdefault(result.law_num, []).extend(r.to_dict() for r in records)
        errors.extend(e.to_dict() for e in result.errors)

    _write_json(output, results)
    _write_json(error_output, errors)
    typer.echo(f"Extracted abbreviations from {len(results)} law(s), {len(errors)} error(s).")


if __name__ == "__main__":
    app()
