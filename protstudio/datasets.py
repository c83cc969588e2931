"""
Protein dataset import and export.

Datasets are lists of :class:`~protstudio.core.models.ProteinRecord`. Two
input formats are accepted:

- JSON: an array of objects with at least a ``sequence`` field; ``id``,
  ``name``, ``organism``, ``length`` and ``tags`` are optional.
- FASTA: any number of records; the header up to the first ``|`` becomes
  the record name.

Sequences are cleaned on import (uppercased, everything outside the 20
standard residues removed). This is the sanitization step the analysis
engine itself deliberately does not perform.
"""

from __future__ import annotations

import json
import logging
from io import StringIO
from pathlib import Path
from typing import Union

from Bio import SeqIO
from pydantic import ValidationError

from .core.models import ProteinRecord
from .core.sequence import clean_sequence

logger = logging.getLogger(__name__)


JSON_SUFFIXES = {".json"}


class DatasetError(Exception):
    """Exception raised for unreadable or empty datasets."""
    pass


def parse_json_dataset(text: str) -> list[ProteinRecord]:
    """
    Parse a JSON dataset.

    Args:
        text: JSON document holding an array of protein objects

    Returns:
        ProteinRecord objects in input order

    Raises:
        DatasetError: If the document is not a JSON array or an entry has no
            usable sequence
    """
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        raise DatasetError(f"Invalid JSON: {e}") from e

    if not isinstance(raw, list):
        raise DatasetError("JSON must be an array of proteins.")

    records = []
    for idx, entry in enumerate(raw):
        if not isinstance(entry, dict):
            raise DatasetError(f"Protein at index {idx} is not an object.")

        seq = clean_sequence(str(entry.get("sequence") or ""))
        if not seq:
            raise DatasetError(f"Protein at index {idx} is missing a valid sequence.")

        organism = entry.get("organism")
        tags = entry.get("tags")
        length = entry.get("length")

        try:
            length = int(length) if length is not None else len(seq)
        except (TypeError, ValueError) as e:
            raise DatasetError(f"Protein at index {idx} has an invalid length: {length!r}") from e

        try:
            record = ProteinRecord(
                id=str(entry["id"]) if entry.get("id") is not None else f"p_{idx + 1}",
                name=str(entry["name"]) if entry.get("name") is not None else f"Protein {idx + 1}",
                organism=str(organism) if organism else None,
                length=length,
                sequence=seq,
                tags=[str(t) for t in tags] if isinstance(tags, list) else [],
            )
        except ValidationError as e:
            raise DatasetError(
                f"Protein at index {idx} is invalid: {e.errors()[0]['msg']}"
            ) from e
        records.append(record)

    return records


def parse_fasta_dataset(text: str) -> list[ProteinRecord]:
    """
    Parse a FASTA dataset.

    Record ``i`` (1-based) gets the id ``fasta_<i>``; records whose cleaned
    sequence is empty are skipped with a warning. Text before the first
    header line is ignored.

    Raises:
        DatasetError: If no record with a valid sequence is found
    """
    handle = StringIO(text.replace("\r", ""))
    parsed = list(SeqIO.parse(handle, "fasta-pearson"))
    if not parsed:
        if text.strip():
            raise DatasetError("No valid sequences found in FASTA.")
        raise DatasetError("FASTA file has no records.")

    records = []
    for idx, record in enumerate(parsed):
        seq = clean_sequence(str(record.seq))
        if not seq:
            logger.warning(f"Skipping FASTA record {idx + 1} ({record.id}): no valid residues")
            continue

        name = record.description.split("|")[0].strip()
        records.append(ProteinRecord(
            id=f"fasta_{idx + 1}",
            name=name or f"FASTA {idx + 1}",
            organism=None,
            length=len(seq),
            sequence=seq,
            tags=["uploaded"],
        ))

    if not records:
        raise DatasetError("No valid sequences found in FASTA.")
    return records


def load_dataset(path: Union[str, Path]) -> list[ProteinRecord]:
    """
    Load a dataset file, picking the parser from the file suffix.

    ``.json`` files are read as JSON, everything else as FASTA.

    Raises:
        DatasetError: If the file cannot be read or holds no proteins
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DatasetError(f"Cannot read {path}: {e}") from e

    if path.suffix.lower() in JSON_SUFFIXES:
        records = parse_json_dataset(text)
    else:
        records = parse_fasta_dataset(text)

    if not records:
        raise DatasetError("Dataset is empty.")

    logger.info(f"Loaded {len(records)} proteins from {path.name}")
    return records


def to_fasta(records: list[ProteinRecord], line_length: int = 60) -> str:
    """
    Convert ProteinRecord objects to a FASTA string.

    The header carries the id, the name and the organism (as ``OS=``).
    """
    lines = []
    for record in records:
        header_parts = [record.id, record.name]
        if record.organism:
            header_parts.append(f"OS={record.organism}")
        lines.append(f">{' '.join(header_parts)}")

        seq = record.sequence
        for i in range(0, len(seq), line_length):
            lines.append(seq[i:i + line_length])

    return "\n".join(lines)


def to_json(records: list[ProteinRecord]) -> str:
    """Serialize records to the JSON dataset format."""
    return json.dumps([r.model_dump(mode="json") for r in records], indent=2)


SAMPLE_DATASET: tuple[ProteinRecord, ...] = (
    ProteinRecord(
        id="1",
        name="Hemoglobin beta chain",
        organism="Homo sapiens",
        length=147,
        sequence=(
            "MVHLTPEEKSAVTALWGKVNVDEVGGEALGRLLVVYPWTQRFFESFGDLSSPDAVMGNPKVKAHGKKVLGAF"
            "SDGLAHLDNLKGTFATLSELHCDKLHVDPENFRLLGNVLVCVLAHHFGKEFTPPVQAAYQKVVAGVANALAHKYH"
        ),
        tags=["oxygen transport", "globin", "classic"],
    ),
    ProteinRecord(
        id="2",
        name="Ubiquitin",
        organism="Homo sapiens",
        length=76,
        sequence="MQIFVKTLTGKTITLEVEPSDTIENVKAKIQDKEGIPPDQQRLIFAGKQLEDGRTLSDYNIQKESTLHLVLRLRGG",
        tags=["protein degradation", "ubiquitin", "small"],
    ),
    ProteinRecord(
        id="3",
        name="Lysozyme C",
        organism="Gallus gallus",
        length=129,
        sequence=(
            "KVFGRCELAAAMKRHGLDNYRGYSLGNWVCAAKFESNFNTQATNRNTDGSTDYGILQINSRWWCNDGRTPGS"
            "RNLCNIPCSALLSSDITASVNCAKKIVSDGNGMNAWVAWRNRCKGTDVQAWIRGCRL"
        ),
        tags=["antimicrobial", "enzyme", "secreted"],
    ),
)
