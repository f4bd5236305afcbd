"""Media type detection from file extensions.

Detection runs in two steps. Extensions in the manual audio and video sets are
resolved first. Everything else is looked up in ``EXTENSION_REGISTRY``, where
each extension lists the media kinds it conforms to; the first kind in
``CONFORMANCE_ORDER`` that the extension conforms to wins.
"""

from __future__ import annotations

import mimetypes
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from .models import MediaType
from .parsing import normalize, parse_url


AUDIO_EXTENSIONS = frozenset(
    {
        # Open formats
        "ogg", "oga", "opus",
        # Lossless
        "ape", "wv", "tta",
        # Theater and streaming
        "dts", "ac3", "eac3",
        # Flash
        "f4a",
    }
)

VIDEO_EXTENSIONS = frozenset(
    {
        # Containers
        "mkv", "webm",
        # Legacy
        "flv", "vob", "ogv",
        # Camera
        "m2ts", "mts",
        # Flash
        "f4v", "f4p",
    }
)

CONFORMANCE_ORDER: Tuple[MediaType, ...] = (
    MediaType.IMAGE,
    MediaType.VIDEO,
    MediaType.AUDIO,
    MediaType.DOCUMENT,
    MediaType.ARCHIVE,
    MediaType.CODE,
    MediaType.DATA,
    MediaType.EXECUTABLE,
    MediaType.FONT,
    MediaType.MODEL3D,
)


@dataclass(frozen=True)
class ExtensionInfo:
    """Registry entry for a single file extension."""

    conforms_to: Tuple[MediaType, ...]
    mime_type: Optional[str]
    description: str


def _info(kinds, mime_type: Optional[str], description: str) -> ExtensionInfo:
    if isinstance(kinds, MediaType):
        kinds = (kinds,)
    return ExtensionInfo(conforms_to=tuple(kinds), mime_type=mime_type, description=description)


IMAGE = MediaType.IMAGE
VIDEO = MediaType.VIDEO
AUDIO = MediaType.AUDIO
DOCUMENT = MediaType.DOCUMENT
ARCHIVE = MediaType.ARCHIVE
CODE = MediaType.CODE
DATA = MediaType.DATA
EXECUTABLE = MediaType.EXECUTABLE
FONT = MediaType.FONT
MODEL3D = MediaType.MODEL3D


EXTENSION_REGISTRY: Mapping[str, ExtensionInfo] = MappingProxyType(
    {
        # Images
        "jpg": _info(IMAGE, "image/jpeg", "JPEG image"),
        "jpeg": _info(IMAGE, "image/jpeg", "JPEG image"),
        "png": _info(IMAGE, "image/png", "PNG image"),
        "gif": _info(IMAGE, "image/gif", "GIF image"),
        "webp": _info(IMAGE, "image/webp", "WebP image"),
        "svg": _info((IMAGE, DOCUMENT), "image/svg+xml", "SVG image"),
        "heic": _info(IMAGE, "image/heic", "HEIC image"),
        "heif": _info(IMAGE, "image/heif", "HEIF image"),
        "tiff": _info(IMAGE, "image/tiff", "TIFF image"),
        "tif": _info(IMAGE, "image/tiff", "TIFF image"),
        "bmp": _info(IMAGE, "image/bmp", "Windows bitmap image"),
        "avif": _info(IMAGE, "image/avif", "AVIF image"),
        "ico": _info(IMAGE, "image/vnd.microsoft.icon", "Windows icon image"),
        "icns": _info(IMAGE, "image/icns", "Apple icon image"),
        "psd": _info(IMAGE, "image/vnd.adobe.photoshop", "Adobe Photoshop document"),
        "raw": _info(IMAGE, None, "Raw image"),
        "dng": _info(IMAGE, "image/x-adobe-dng", "Digital negative image"),
        "cr2": _info(IMAGE, None, "Canon raw image"),
        "nef": _info(IMAGE, None, "Nikon raw image"),
        # Video
        "mp4": _info(VIDEO, "video/mp4", "MPEG-4 movie"),
        "m4v": _info(VIDEO, "video/x-m4v", "MPEG-4 video"),
        "mov": _info(VIDEO, "video/quicktime", "QuickTime movie"),
        "avi": _info(VIDEO, "video/x-msvideo", "AVI movie"),
        "mpg": _info(VIDEO, "video/mpeg", "MPEG movie"),
        "mpeg": _info(VIDEO, "video/mpeg", "MPEG movie"),
        "wmv": _info(VIDEO, "video/x-ms-wmv", "Windows Media video"),
        "3gp": _info(VIDEO, "video/3gpp", "3GPP movie"),
        "3g2": _info(VIDEO, "video/3gpp2", "3GPP2 movie"),
        "ts": _info((VIDEO, CODE), "video/mp2t", "MPEG-2 transport stream"),
        "mkv": _info(VIDEO, "video/x-matroska", "Matroska video"),
        "webm": _info(VIDEO, "video/webm", "WebM video"),
        "flv": _info(VIDEO, "video/x-flv", "Flash video"),
        "vob": _info(VIDEO, "video/dvd", "DVD video object"),
        "ogv": _info(VIDEO, "video/ogg", "Ogg video"),
        "m2ts": _info(VIDEO, "video/mp2t", "Blu-ray transport stream"),
        "mts": _info(VIDEO, "video/mp2t", "AVCHD transport stream"),
        "f4v": _info(VIDEO, "video/x-f4v", "Flash MP4 video"),
        "f4p": _info(VIDEO, "video/mp4", "Protected Flash MP4 video"),
        # Audio
        "mp3": _info(AUDIO, "audio/mpeg", "MP3 audio"),
        "wav": _info(AUDIO, "audio/wav", "Waveform audio"),
        "m4a": _info(AUDIO, "audio/mp4", "MPEG-4 audio"),
        "aac": _info(AUDIO, "audio/aac", "AAC audio"),
        "flac": _info(AUDIO, "audio/flac", "FLAC audio"),
        "wma": _info(AUDIO, "audio/x-ms-wma", "Windows Media audio"),
        "aiff": _info(AUDIO, "audio/aiff", "AIFF audio"),
        "aif": _info(AUDIO, "audio/aiff", "AIFF audio"),
        "aifc": _info(AUDIO, "audio/aiff", "AIFF-C audio"),
        "caf": _info(AUDIO, "audio/x-caf", "Core Audio file"),
        "mid": _info(AUDIO, "audio/midi", "MIDI audio"),
        "midi": _info(AUDIO, "audio/midi", "MIDI audio"),
        "amr": _info(AUDIO, "audio/amr", "AMR audio"),
        "m4b": _info(AUDIO, "audio/mp4", "MPEG-4 audiobook"),
        "ogg": _info(AUDIO, "audio/ogg", "Ogg audio"),
        "oga": _info(AUDIO, "audio/ogg", "Ogg audio"),
        "opus": _info(AUDIO, "audio/opus", "Opus audio"),
        "ape": _info(AUDIO, "audio/ape", "Monkey's Audio"),
        "wv": _info(AUDIO, "audio/wavpack", "WavPack audio"),
        "tta": _info(AUDIO, "audio/x-tta", "True Audio"),
        "dts": _info(AUDIO, "audio/vnd.dts", "DTS audio"),
        "ac3": _info(AUDIO, "audio/ac3", "Dolby Digital audio"),
        "eac3": _info(AUDIO, "audio/eac3", "Dolby Digital Plus audio"),
        "f4a": _info(AUDIO, "audio/mp4", "Flash MP4 audio"),
        # Documents
        "pdf": _info(DOCUMENT, "application/pdf", "PDF document"),
        "txt": _info(DOCUMENT, "text/plain", "Plain text document"),
        "text": _info(DOCUMENT, "text/plain", "Plain text document"),
        "rtf": _info(DOCUMENT, "text/rtf", "Rich text document"),
        "rtfd": _info(DOCUMENT, None, "Rich text document with attachments"),
        "md": _info(DOCUMENT, "text/markdown", "Markdown document"),
        "markdown": _info(DOCUMENT, "text/markdown", "Markdown document"),
        "html": _info(DOCUMENT, "text/html", "HTML document"),
        "htm": _info(DOCUMENT, "text/html", "HTML document"),
        "xhtml": _info(DOCUMENT, "application/xhtml+xml", "XHTML document"),
        "doc": _info(DOCUMENT, "application/msword", "Microsoft Word document"),
        "docx": _info(
            DOCUMENT,
            "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
            "Microsoft Word document",
        ),
        "odt": _info(DOCUMENT, "application/vnd.oasis.opendocument.text", "OpenDocument text"),
        "pages": _info(DOCUMENT, "application/vnd.apple.pages", "Pages document"),
        "epub": _info(DOCUMENT, "application/epub+zip", "EPUB publication"),
        "xls": _info(DOCUMENT, "application/vnd.ms-excel", "Microsoft Excel spreadsheet"),
        "xlsx": _info(
            DOCUMENT,
            "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
            "Microsoft Excel spreadsheet",
        ),
        "ods": _info(
            DOCUMENT, "application/vnd.oasis.opendocument.spreadsheet", "OpenDocument spreadsheet"
        ),
        "numbers": _info(DOCUMENT, "application/vnd.apple.numbers", "Numbers spreadsheet"),
        "ppt": _info(DOCUMENT, "application/vnd.ms-powerpoint", "Microsoft PowerPoint presentation"),
        "pptx": _info(
            DOCUMENT,
            "application/vnd.openxmlformats-officedocument.presentationml.presentation",
            "Microsoft PowerPoint presentation",
        ),
        "odp": _info(
            DOCUMENT, "application/vnd.oasis.opendocument.presentation", "OpenDocument presentation"
        ),
        "key": _info(DOCUMENT, "application/vnd.apple.keynote", "Keynote presentation"),
        "tex": _info(DOCUMENT, "application/x-tex", "TeX document"),
        "log": _info(DOCUMENT, "text/plain", "Log file"),
        # Archives
        "zip": _info(ARCHIVE, "application/zip", "ZIP archive"),
        "rar": _info(ARCHIVE, "application/vnd.rar", "RAR archive"),
        "7z": _info(ARCHIVE, "application/x-7z-compressed", "7-Zip archive"),
        "tar": _info(ARCHIVE, "application/x-tar", "tar archive"),
        "gz": _info(ARCHIVE, "application/gzip", "gzip archive"),
        "tgz": _info(ARCHIVE, "application/gzip", "gzip tar archive"),
        "bz2": _info(ARCHIVE, "application/x-bzip2", "bzip2 archive"),
        "xz": _info(ARCHIVE, "application/x-xz", "XZ archive"),
        "zst": _info(ARCHIVE, "application/zstd", "Zstandard archive"),
        "dmg": _info(ARCHIVE, "application/x-apple-diskimage", "Apple disk image"),
        "iso": _info(ARCHIVE, "application/x-iso9660-image", "ISO disk image"),
        "jar": _info((ARCHIVE, EXECUTABLE), "application/java-archive", "Java archive"),
        "cab": _info(ARCHIVE, "application/vnd.ms-cab-compressed", "Windows cabinet archive"),
        # Source code
        "py": _info(CODE, "text/x-python", "Python script"),
        "js": _info(CODE, "text/javascript", "JavaScript source"),
        "mjs": _info(CODE, "text/javascript", "JavaScript module"),
        "tsx": _info(CODE, None, "TypeScript JSX source"),
        "jsx": _info(CODE, None, "JavaScript JSX source"),
        "java": _info(CODE, "text/x-java-source", "Java source"),
        "kt": _info(CODE, None, "Kotlin source"),
        "c": _info(CODE, "text/x-c", "C source"),
        "h": _info(CODE, "text/x-c", "C header"),
        "cpp": _info(CODE, "text/x-c++src", "C++ source"),
        "cc": _info(CODE, "text/x-c++src", "C++ source"),
        "hpp": _info(CODE, "text/x-c++hdr", "C++ header"),
        "m": _info(CODE, "text/x-objcsrc", "Objective-C source"),
        "cs": _info(CODE, None, "C# source"),
        "go": _info(CODE, None, "Go source"),
        "rs": _info(CODE, None, "Rust source"),
        "rb": _info(CODE, "text/x-ruby", "Ruby script"),
        "php": _info(CODE, "application/x-httpd-php", "PHP script"),
        "pl": _info(CODE, "text/x-perl", "Perl script"),
        "swift": _info(CODE, "text/x-swift", "Swift source"),
        "scala": _info(CODE, None, "Scala source"),
        "lua": _info(CODE, None, "Lua script"),
        "r": _info(CODE, None, "R script"),
        "css": _info(CODE, "text/css", "CSS style sheet"),
        "scss": _info(CODE, None, "Sass style sheet"),
        "sh": _info(CODE, "application/x-sh", "Shell script"),
        "bash": _info(CODE, "application/x-sh", "Bash script"),
        "zsh": _info(CODE, None, "Zsh script"),
        "ps1": _info(CODE, None, "PowerShell script"),
        # Data
        "json": _info(DATA, "application/json", "JSON document"),
        "csv": _info(DATA, "text/csv", "Comma-separated values"),
        "tsv": _info(DATA, "text/tab-separated-values", "Tab-separated values"),
        "xml": _info(DATA, "application/xml", "XML document"),
        "yaml": _info(DATA, "application/yaml", "YAML document"),
        "yml": _info(DATA, "application/yaml", "YAML document"),
        "toml": _info(DATA, "application/toml", "TOML document"),
        "sql": _info(DATA, "application/sql", "SQL script"),
        "sqlite": _info(DATA, "application/vnd.sqlite3", "SQLite database"),
        "db": _info(DATA, None, "Database file"),
        "parquet": _info(DATA, None, "Apache Parquet data"),
        "plist": _info(DATA, "application/x-plist", "Property list"),
        "ics": _info(DATA, "text/calendar", "Calendar data"),
        "vcf": _info(DATA, "text/vcard", "vCard contact"),
        # Executables
        "exe": _info(EXECUTABLE, "application/vnd.microsoft.portable-executable", "Windows executable"),
        "msi": _info(EXECUTABLE, "application/x-msi", "Windows installer package"),
        "app": _info(EXECUTABLE, None, "Application bundle"),
        "dll": _info(EXECUTABLE, "application/x-msdownload", "Dynamic link library"),
        "so": _info(EXECUTABLE, None, "Shared library"),
        "dylib": _info(EXECUTABLE, None, "Dynamic library"),
        "bin": _info(EXECUTABLE, "application/octet-stream", "Binary file"),
        "apk": _info(EXECUTABLE, "application/vnd.android.package-archive", "Android package"),
        "ipa": _info(EXECUTABLE, None, "iOS application archive"),
        "deb": _info(EXECUTABLE, "application/vnd.debian.binary-package", "Debian package"),
        "rpm": _info(EXECUTABLE, "application/x-rpm", "RPM package"),
        "pkg": _info(EXECUTABLE, None, "Installer package"),
        # Fonts
        "ttf": _info(FONT, "font/ttf", "TrueType font"),
        "otf": _info(FONT, "font/otf", "OpenType font"),
        "woff": _info(FONT, "font/woff", "Web Open Font Format"),
        "woff2": _info(FONT, "font/woff2", "Web Open Font Format 2"),
        "eot": _info(FONT, "application/vnd.ms-fontobject", "Embedded OpenType font"),
        "ttc": _info(FONT, "font/collection", "TrueType font collection"),
        # 3D content
        "obj": _info(MODEL3D, "model/obj", "Wavefront OBJ model"),
        "stl": _info(MODEL3D, "model/stl", "STL model"),
        "fbx": _info(MODEL3D, None, "FBX model"),
        "gltf": _info(MODEL3D, "model/gltf+json", "glTF model"),
        "glb": _info(MODEL3D, "model/gltf-binary", "Binary glTF model"),
        "usdz": _info(MODEL3D, "model/vnd.usdz+zip", "Universal Scene Description package"),
        "usd": _info(MODEL3D, None, "Universal Scene Description"),
        "dae": _info(MODEL3D, "model/vnd.collada+xml", "COLLADA model"),
        "3ds": _info(MODEL3D, None, "3D Studio model"),
        "ply": _info(MODEL3D, None, "Polygon file"),
        "3mf": _info(MODEL3D, "model/3mf", "3D Manufacturing Format model"),
    }
)


class MediaTypeDetector:
    """Classify URLs by the extension of their last path segment."""

    @classmethod
    def detect_media_type(cls, url: str) -> MediaType:
        """Detect the media type of the resource a URL string points at."""
        if not isinstance(url, str):
            return MediaType.UNKNOWN
        parsed = parse_url(normalize(url))
        if parsed is None:
            return MediaType.UNKNOWN
        return cls.media_type_for_extension(parsed.path_extension)

    @classmethod
    def media_type_for_extension(cls, extension: str) -> MediaType:
        """Resolve a bare extension (without the dot) to a media type."""
        extension = extension.lower().lstrip(".")
        if not extension:
            return MediaType.UNKNOWN

        if extension in AUDIO_EXTENSIONS:
            return MediaType.AUDIO
        if extension in VIDEO_EXTENSIONS:
            return MediaType.VIDEO

        info = EXTENSION_REGISTRY.get(extension)
        if info is None:
            return MediaType.UNKNOWN

        for media_type in CONFORMANCE_ORDER:
            if media_type in info.conforms_to:
                return media_type
        return MediaType.UNKNOWN


def detect_media_type(url: str) -> MediaType:
    """Module-level shortcut for :meth:`MediaTypeDetector.detect_media_type`."""
    return MediaTypeDetector.detect_media_type(url)


def mime_type_for(extension: str) -> Optional[str]:
    """Return the MIME type for an extension, if one is known."""
    extension = extension.lower().lstrip(".")
    if not extension:
        return None
    info = EXTENSION_REGISTRY.get(extension)
    if info is not None and info.mime_type:
        return info.mime_type
    mime_type, _ = mimetypes.guess_type(f"file.{extension}", strict=False)
    return mime_type


def describe_extension(extension: str) -> Optional[str]:
    """Return a human-readable description of an extension, if registered."""
    info = EXTENSION_REGISTRY.get(extension.lower().lstrip("."))
    return info.description if info is not None else None


__all__ = [
    "AUDIO_EXTENSIONS",
    "VIDEO_EXTENSIONS",
    "CONFORMANCE_ORDER",
    "ExtensionInfo",
    "EXTENSION_REGISTRY",
    "MediaTypeDetector",
    "detect_media_type",
    "mime_type_for",
    "describe_extension",
]
