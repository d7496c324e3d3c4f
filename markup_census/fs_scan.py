from __future__ import annotations

import os
from typing import Dict, List, Optional

from .model import AnalyzerOptions, FileInfo


EXTENSION_LANGUAGE: Dict[str, str] = {
	".ts": "typescript",
	".tsx": "tsx",
}


def detect_language(filename: str) -> str:
	_, ext = os.path.splitext(filename)
	return EXTENSION_LANGUAGE.get(ext.lower(), "unknown")


def scan_repository(root: str, options: Optional[AnalyzerOptions] = None) -> List[FileInfo]:
	options = options or AnalyzerOptions()
	extensions = {ext.lower() for ext in options.extensions}
	excluded = set(options.exclude_dirs)
	files: List[FileInfo] = []
	for dirpath, dirnames, filenames in os.walk(root):
		dirnames[:] = sorted(d for d in dirnames if d not in excluded)
		for filename in sorted(filenames):
			_, ext = os.path.splitext(filename)
			language = detect_language(filename)
			if ext.lower() not in extensions or language == "unknown":
				continue
			path = os.path.join(dirpath, filename)
			files.append(
				FileInfo(
					path=path,
					rel_path=os.path.relpath(path, root),
					language=language,
				)
			)
	return files
