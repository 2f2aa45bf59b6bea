from pathlib import Path
from typing import Iterator, Optional

POST_SUFFIX = ".md"


class FilePostsRepo:
    def __init__(self, root: Path):
        self.root = Path(root)

    def list_post_paths(self) -> Iterator[Path]:
        """Yield every Markdown file under the root, in sorted path order."""
        if not self.root.is_dir():
            return
        for path in sorted(self.root.rglob(f"*{POST_SUFFIX}")):
            if path.is_file():
                yield path

    def read(self, path: Path) -> str:
        return path.read_text(encoding="utf-8")

    def path_for_slug(self, slug: str) -> Optional[Path]:
        if not self._is_safe_slug(slug):
            return None
        root = self.root.resolve()
        path = (root / f"{slug}{POST_SUFFIX}").resolve()
        if path.parent != root:
            return None
        return path

    @staticmethod
    def _is_safe_slug(slug: str | None) -> bool:
        if not slug or not slug.strip():
            return False
        if slug.startswith("."):
            return False
        return not any(sep in slug for sep in ("/", "\\", "\x00"))
