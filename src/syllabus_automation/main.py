"""
Syllabus Build

Loads one course configuration and renders every syllabus fragment from it.
Assembling the fragments into a finished page is left to the site generator.
"""

from pathlib import Path

from .config.loader import ConfigLoader, LoadResult
from .rendering import (
    create_table_caption,
    format_assignments,
    format_course_description,
    format_course_header,
    format_grading_scale,
    format_instructor_info,
    format_learning_outcomes,
    format_meeting_info,
    format_schedule_table,
    format_textbooks,
)
from .utils.files import ensure_dir
from .utils.logging import get_logger

logger = get_logger(__name__)

FRAGMENT_ORDER = (
    "header",
    "instructor",
    "meeting",
    "description",
    "learning_outcomes",
    "textbooks",
    "schedule",
    "assignments",
    "grading",
)


class BuildError(Exception):
    """The configuration could not be loaded well enough to render."""

    pass


class SyllabusBuild:
    """Runs one load-and-render pass for a course configuration."""

    def __init__(
        self,
        config_file: str | Path,
        base_dir: Path | None = None,
        strict: bool = False,
        max_rows: int | None = None,
    ):
        """Initialize the build.

        Args:
            config_file: Path to the course YAML file
            base_dir: Directory relative data paths resolve against
            strict: Abort on schema or date failures instead of reporting them
            max_rows: Limit schedule and assignment tables (for previews)
        """
        self.config_file = Path(config_file)
        self.loader = ConfigLoader(base_dir=base_dir, strict=strict)
        self.max_rows = max_rows
        self.result: LoadResult | None = None

    def load(self) -> LoadResult:
        self.result = self.loader.load(self.config_file)
        return self.result

    def run(self) -> dict[str, str]:
        """Load the configuration and render all fragments.

        Returns:
            Ordered mapping of fragment name to markdown/HTML text

        Raises:
            BuildError: If no configuration could be produced
        """
        result = self.load()
        if result.config is None:
            reasons = "; ".join(m.text for m in result.errors) or "unknown error"
            raise BuildError(f"Cannot render {self.config_file}: {reasons}")

        if not result.success:
            logger.warning(
                f"Rendering {self.config_file} despite {len(result.errors)} validation error(s)"
            )

        config = result.config
        fragments = {
            "header": format_course_header(config),
            "instructor": format_instructor_info(config),
            "meeting": format_meeting_info(config),
            "description": format_course_description(config),
            "learning_outcomes": format_learning_outcomes(config),
            "textbooks": format_textbooks(config),
            "schedule": format_schedule_table(
                result.table("schedule"),
                max_rows=self.max_rows,
                caption=create_table_caption("schedule"),
            ),
            "assignments": format_assignments(
                result.table("assignments"),
                max_rows=self.max_rows,
                caption=create_table_caption("assignments"),
            ),
            "grading": format_grading_scale(
                result.table("grading"),
                caption=create_table_caption("grading"),
            ),
        }
        logger.info(f"Rendered {len(fragments)} fragments for {config.course.code}")
        return {name: fragments[name] for name in FRAGMENT_ORDER}

    def write(self, output_dir: Path, fragments: dict[str, str] | None = None) -> list[Path]:
        """Write each fragment to ``<output_dir>/<name>.md``.

        Args:
            output_dir: Directory to write into (created if needed)
            fragments: Previously rendered fragments; rendered now if omitted

        Returns:
            Paths of the written files, in fragment order
        """
        if fragments is None:
            fragments = self.run()

        ensure_dir(output_dir)
        written: list[Path] = []
        for name, text in fragments.items():
            path = output_dir / f"{name}.md"
            path.write_text(text + "\n", encoding="utf-8")
            written.append(path)
            logger.debug(f"Wrote {path}")

        logger.info(f"Wrote {len(written)} fragments to {output_dir}")
        return written
