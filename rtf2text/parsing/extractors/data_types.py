import typing
from abc import abstractmethod
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import List, Protocol


@dataclass
class FileMetadataInterface:
    filename: str | None = None
    file_extension: str | None = None
    file_path: str | None = None
    folder_path: str | None = None

    def populate_from_path(self, path: str | Path | None) -> None:
        """Populate file metadata fields from a path."""
        if path is None:
            return
        p = Path(path)
        self.filename = p.name
        self.file_extension = p.suffix
        self.file_path = str(p.resolve()) if p.exists() else str(p)
        self.folder_path = (
            str(p.parent.resolve()) if p.parent.exists() else str(p.parent)
        )

    def to_dict(self) -> dict:
        return asdict(self)


class ExtractionInterface(Protocol):
    @abstractmethod
    def iterator(self) -> typing.Iterator[str]:
        """
        Returns an iterator over the extracted text i.e., the main text body of a file.
        Text in suppressed destinations (font tables, fields, pictures, headers
        and footers, ...) is not part of this iterator's return values.
        RTF documents return one unit per non-empty paragraph.
        """
        ...

    @abstractmethod
    def get_full_text(self) -> str:
        """Full text of the document as one single block of text"""
        ...

    @abstractmethod
    def get_metadata(self) -> FileMetadataInterface:
        """Returns the metadata of the extracted file"""
        ...


#######
# RTF
#######


@dataclass
class RtfMetadata(FileMetadataInterface):
    """Metadata of an RTF extraction run."""

    # encoding used to decode the file bytes before stripping
    detected_encoding: str = ""
    # 0 = ok, 1 = corrupted, 2 = not rtf (see ReturnCode)
    return_code: int = 0
    warnings: List[str] = field(default_factory=list)

    @property
    def is_corrupted(self) -> bool:
        return self.return_code == 1


@dataclass
class RtfParagraph:
    text: str = ""


@dataclass
class RtfContent(ExtractionInterface):
    """Visible text extracted from an RTF file."""

    metadata: RtfMetadata = field(default_factory=RtfMetadata)
    paragraphs: List[RtfParagraph] = field(default_factory=list)
    full_text: str = ""

    def iterator(self) -> typing.Iterator[str]:
        for paragraph in self.paragraphs:
            if paragraph.text.strip():
                yield paragraph.text

    def get_full_text(self) -> str:
        """Full text of the RTF document as one single block of text."""
        return self.full_text

    def get_metadata(self) -> RtfMetadata:
        """Returns the metadata of the extracted file."""
        return self.metadata

    def to_json(self) -> dict:
        from rtf2text.parsing.extractors.serialization import serialize_extraction

        return serialize_extraction(self)
