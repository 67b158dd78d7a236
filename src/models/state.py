"""
Program state model and pipeline helper

ProgramState carries one CLI run of the compiler from the YAML style
document to the written stylesheets; pipeline() threads it through the
stages of __main__.
"""

import dataclasses
from functools import reduce
from pathlib import Path
from argparse import Namespace
from typing import Any, Optional, Type, TypeVar, Dict, Callable
from dataclasses import dataclass, field


PS = TypeVar("PS", bound="ProgramState")


@dataclass
class ProgramState:
    """
    State of one stylesheet build, passed from stage to stage.

    Stage additions:
        - env_check: inputSourceFile, cssOutputdir, envOK
        - source_parse: parsedSource (the document's `keyframes` and
          `styles` sections)
        - css_compile: compileResult (paths of `<stem>.css`,
          `<stem>.rtl.css` and `<stem>.json`, plus the unique rule count)

    Attributes:
        inputdir: Directory holding the YAML style document
        outputdir: Base directory for the generated stylesheets
        verbosity: LOG level (1 summary, 2 per rule, 3 per declaration)
        inputFile: Style document name, relative to inputdir
        outputSubdir: Subdirectory of outputdir receiving the files
        styleResolution: "logical" or "physical"; None leaves the choice
                         to ATOMCSS_STYLE_RESOLUTION and its default
        strict: Strict values and properties; None defers to the
                ATOMCSS_STRICT_* settings
    """

    # CLI arguments
    inputdir: Optional[Path] = field(default=None)
    outputdir: Optional[Path] = field(default=None)
    verbosity: int = field(default=1)
    inputFile: str = field(default="")
    outputSubdir: str = field(default=".")
    styleResolution: Optional[str] = field(default=None)
    strict: Optional[bool] = field(default=None)

    # Pipeline state
    envOK: bool = field(default=False)
    inputSourceFile: Path = field(default=Path("/"))
    cssOutputdir: Path = field(default=Path("/"))
    parsedSource: Optional[Dict[str, Any]] = field(default=None)
    compileResult: Optional[Dict[str, Any]] = field(default=None)

    @classmethod
    def state_createFromNamespace(
        cls: Type["ProgramState"], options: Namespace, inputdir: Path, outputdir: Path
    ) -> "ProgramState":
        """
        Build the initial state from parsed CLI options.

        Options without a matching field (chris_plugin adds its own) are
        dropped.
        """
        valid_fields = {f.name for f in dataclasses.fields(cls)}
        options_dict = {k: v for k, v in vars(options).items() if k in valid_fields}
        return cls(**{**options_dict, "inputdir": inputdir, "outputdir": outputdir})

    def settings_overrides(self) -> Dict[str, Any]:
        """
        AppSettings keyword arguments for the options given on the command line.

        Options left unset are omitted so environment variables and .env
        values still apply to them.

        Example:
            >>> ProgramState(strict=True).settings_overrides()
            {'strict_values': True, 'strict_properties': True}
        """
        overrides: Dict[str, Any] = {}
        if self.styleResolution is not None:
            overrides["style_resolution"] = self.styleResolution
        if self.strict is not None:
            overrides["strict_values"] = self.strict
            overrides["strict_properties"] = self.strict
        return overrides

    def copy(self: PS) -> PS:
        return type(self)(**self.__dict__)


def pipeline(
    initial_state: ProgramState, *stages: Callable[[ProgramState], ProgramState]
) -> ProgramState:
    """
    Run the stages in order, each receiving the previous stage's state.

    Example:
        pipeline(state, env_check, source_parse, css_compile, results_report)
    """
    return reduce(lambda state, stage: stage(state), stages, initial_state)
