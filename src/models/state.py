"""
Program state model and pipeline helper

Defines ProgramState dataclass for the functional pipeline pattern and
the pipeline() helper for composing transformation stages.
"""

from pathlib import Path
from argparse import Namespace
from typing import Any, Optional, Type, TypeVar, List, Dict, Callable, TYPE_CHECKING
from dataclasses import dataclass, field

# Forward reference for type hint - avoid circular import
if TYPE_CHECKING:
    from ..lib.paths import ExportSession


PS = TypeVar("PS", bound="ProgramState")


@dataclass
class ProgramState:
    """
    Central state container for the export pipeline (state bus pattern).

    This dataclass carries all program state through the functional pipeline,
    with each stage adding new fields as the export progresses.

    Pipeline stages and their state additions:
        - Initial: inputdir, outputdir, verbosity, authorsFile, includesDir,
          pageUrl, strict
        - env_check: authorsSourceFile, includesInputdir, envOK
        - pages_load: contentTree, pageUrls
        - pages_export: session, exportResults, failedPages
        - redirects_write: redirectsFile
        - results_report: (no additions, terminal stage)

    Attributes:
        inputdir: Directory containing the source content tree
        outputdir: Directory receiving exported DevSite documents
        verbosity: Logging verbosity level (1-3)
        authorsFile: Optional authors table path (defaults to settings)
        includesDir: Optional directory of templates available to includes
        pageUrl: Optional list of page URLs to export (default: all pages)
        strict: Treat per-page export failures as a fatal exit status
        envOK: Environment validation passed
        authorsSourceFile: Resolved path to the authors table
        includesInputdir: Resolved includes directory (None when not given)
        contentTree: Page lookup over inputdir
        pageUrls: URLs selected for export
        session: ExportSession shared by every page export of this build
        exportResults: Number of documents written, keyed by status
        failedPages: Page URL -> error message for pages that aborted
        redirectsFile: Path of the written redirect table
    """

    # CLI arguments
    inputdir: Optional[Path] = field(default=None)
    outputdir: Optional[Path] = field(default=None)
    verbosity: int = field(default=1)
    authorsFile: Optional[str] = field(default=None)
    includesDir: Optional[str] = field(default=None)
    pageUrl: Optional[List[str]] = field(default=None)
    strict: bool = field(default=False)

    # Pipeline state
    envOK: bool = field(default=False)
    authorsSourceFile: Path = field(default=Path("/"))
    includesInputdir: Optional[Path] = field(default=None)
    contentTree: Optional[Any] = field(default=None)  # ContentTree at runtime
    pageUrls: List[str] = field(default_factory=list)
    session: Optional["ExportSession"] = field(default=None)
    exportResults: Optional[Dict[str, int]] = field(default=None)
    failedPages: Dict[str, str] = field(default_factory=dict)
    redirectsFile: Optional[Path] = field(default=None)

    @classmethod
    def state_createFromNamespace(
        cls: Type["ProgramState"], options: Namespace, inputdir: Path, outputdir: Path
    ) -> "ProgramState":
        """
        Create ProgramState from argparse Namespace and directory paths.

        Merges CLI options with explicitly provided directories to create
        the initial program state for the export pipeline.

        Args:
            options: Parsed CLI arguments (authorsFile, pageUrl, etc.)
            inputdir: Directory containing source content
            outputdir: Directory for exported documents

        Returns:
            ProgramState instance with all CLI options as attributes
        """
        options_dict = vars(options)

        import dataclasses
        valid_fields = {f.name for f in dataclasses.fields(cls)}

        # Filter options_dict to only include fields that exist in ProgramState
        filtered_options = {k: v for k, v in options_dict.items() if k in valid_fields}

        merged_args = {**filtered_options, "inputdir": inputdir, "outputdir": outputdir}

        return cls(**merged_args)

    def copy(self: PS) -> PS:
        """
        Creates a shallow copy of the ProgramState instance.

        The ExportSession is shared by reference, so every stage sees the
        same URL map.

        Returns:
            A new ProgramState instance.
        """
        return type(self)(**self.__dict__)


def pipeline(
    initial_state: ProgramState, *stages: Callable[[ProgramState], ProgramState]
) -> ProgramState:
    """
    Execute a functional pipeline of state transformations.

    Each stage is a function (ProgramState) -> ProgramState that receives
    the output of the previous stage and returns a new state.

    Args:
        initial_state: Starting ProgramState
        *stages: Variable number of stage functions to execute in order

    Returns:
        Final ProgramState after all transformations

    Example:
        final_state = pipeline(
            initial_state,
            env_check,
            pages_load,
            pages_export,
            redirects_write,
            results_report
        )
    """
    from functools import reduce
    return reduce(lambda state, stage: stage(state), stages, initial_state)
