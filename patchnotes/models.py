"""
Upstream payloads and the normalized entry built from them.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class Image:
    """Image reference; url is relative upstream and absolute once normalized."""
    title: str
    url: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Image':
        return cls(title=data['title'], url=data['url'])


@dataclass(frozen=True)
class VersionRecord:
    """One game version from the piston-meta version manifest."""
    id: str
    type: str
    url: str
    time: str
    release_time: str
    sha1: str
    compliance_level: int

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'VersionRecord':
        return cls(
            id=data['id'],
            type=data['type'],
            url=data['url'],
            time=data['time'],
            release_time=data['releaseTime'],
            sha1=data['sha1'],
            compliance_level=data.get('complianceLevel', 0),
        )

    @classmethod
    def missing(cls) -> 'VersionRecord':
        """Placeholder used when a patch note names a version the manifest lacks."""
        return cls(id='', type='', url='', time='', release_time='', sha1='', compliance_level=-1)


@dataclass(frozen=True)
class VersionManifest:
    """Snapshot of all known game versions."""
    latest_release: str
    latest_snapshot: str
    versions: List[VersionRecord] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'VersionManifest':
        latest = data['latest']
        return cls(
            latest_release=latest['release'],
            latest_snapshot=latest['snapshot'],
            versions=[VersionRecord.from_dict(v) for v in data['versions']],
        )

    def find(self, version_id: str) -> Optional[VersionRecord]:
        """Return the first record whose id equals version_id exactly."""
        for record in self.versions:
            if record.id == version_id:
                return record
        return None


@dataclass(frozen=True)
class RawPatchNote:
    """Entry of javaPatchNotes.json pointing at the full article."""
    title: str
    version: str
    type: str
    image: Image
    content_path: str
    id: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'RawPatchNote':
        return cls(
            title=data['title'],
            version=data['version'],
            type=data['type'],
            image=Image.from_dict(data['image']),
            content_path=data['contentPath'],
            id=data['id'],
        )


@dataclass(frozen=True)
class ArticleContent:
    """Full patch note article fetched from the launcher content API."""
    title: str
    image: Image
    body: str
    id: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ArticleContent':
        return cls(
            title=data['title'],
            image=Image.from_dict(data['image']),
            body=data['body'],
            id=data['id'],
        )


@dataclass(frozen=True)
class NormalizedEntry:
    """Feed-ready patch note combining index, manifest and article data."""
    title: str
    time: str
    version: str
    type: str
    image: Image
    body: str
    id: str

    @property
    def published(self) -> Optional[datetime]:
        """Parsed time, or None for the empty placeholder."""
        return parse_timestamp(self.time)


def parse_timestamp(value: str) -> Optional[datetime]:
    """Parse an ISO 8601 manifest timestamp, accepting a trailing 'Z'."""
    if not value:
        return None
    if value.endswith('Z'):
        value = value[:-1] + '+00:00'
    return datetime.fromisoformat(value)
