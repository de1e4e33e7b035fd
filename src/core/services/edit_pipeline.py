"""Edit pipeline orchestration.

The pipeline owns the whole control flow of a run:

    parse -> fetch -> edit -> validate -> no-change check
          -> select policy -> diff + confirm -> publish

Every step is an injected capability (see `core.interfaces.pipeline`); this
module holds the only cross-step state and is the only place that decides
how a run ends. It never touches the process: the CLI turns the returned
`PipelineResult` into an exit code.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from core.domain.errors import UserFacingError
from core.domain.models import (
    Abort,
    AccessPolicy,
    Coordinate,
    Outcome,
    PipelineResult,
)
from core.interfaces.pipeline import (
    ConfirmationGate,
    DiffPresenter,
    InteractiveEditor,
    RemoteFetcher,
    RemotePublisher,
)
from core.services.content_validator import ensure_content
from core.services.path_resolver import parse_location

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_USER_ERROR = 1


def confirmation_message(coord: Coordinate, policy: AccessPolicy) -> str:
    return f"Publish s3://{coord} with ACL '{policy.value}'?"


@dataclass
class EditPipeline:
    """Fetch -> edit -> diff -> confirm -> push, for a single object."""

    fetcher: RemoteFetcher
    editor: InteractiveEditor
    diff: DiffPresenter
    gate: ConfirmationGate
    publisher: RemotePublisher
    json_indent: int = 2

    def run(self, raw_location: object) -> PipelineResult:
        """Execute one edit session.

        User-facing errors end the run with exit code 1; anything else
        propagates to the caller untouched.
        """

        try:
            return self._run(raw_location)
        except UserFacingError as exc:
            logger.debug("Run failed: %s", exc.__class__.__name__)
            return PipelineResult(
                outcome=Outcome.FAILED,
                exit_code=EXIT_USER_ERROR,
                message=str(exc),
            )

    def _run(self, raw_location: object) -> PipelineResult:
        coord = parse_location(raw_location)
        logger.debug("Parsed location: %r", coord)

        prev_text = self.fetcher.fetch(coord)
        logger.debug("Prior object %s", "absent" if prev_text is None else "present")

        suffix = f".{coord.extension}" if coord.extension else ""
        edited = self.editor.edit(prev_text if prev_text is not None else "", suffix=suffix)
        next_text = ensure_content(edited, coord.extension, indent=self.json_indent)
        logger.debug("Validated content (extension=%r)", coord.extension)

        if prev_text is not None and next_text == prev_text:
            logger.debug("No change against the prior object, skipping prompts")
            return PipelineResult(
                outcome=Outcome.NO_CHANGE,
                exit_code=EXIT_OK,
                message=f"No changes to s3://{coord}.",
                coordinate=coord,
            )

        policy = self.gate.select_policy(list(AccessPolicy), AccessPolicy.default())
        if isinstance(policy, Abort):
            logger.debug("Policy selection aborted: %s", policy.reason)
            return PipelineResult(
                outcome=Outcome.POLICY_CANCELLED,
                exit_code=EXIT_OK,
                message=f"Cancelled ({policy.reason}).",
                coordinate=coord,
            )

        if prev_text is not None:
            self.diff.show(prev_text, next_text)

        answer = self.gate.confirm(confirmation_message(coord, policy))
        if isinstance(answer, Abort) or not answer:
            logger.debug("Publish not confirmed")
            return PipelineResult(
                outcome=Outcome.DECLINED,
                exit_code=EXIT_OK,
                message="Aborted, nothing was published.",
                coordinate=coord,
                policy=policy,
            )

        logger.debug("Publish confirmed with policy %s", policy.value)
        self.publisher.publish(coord, next_text, policy)
        logger.debug("Run finished: published %s", coord)
        return PipelineResult(
            outcome=Outcome.PUBLISHED,
            exit_code=EXIT_OK,
            message=f"Published s3://{coord} ({policy.value}).",
            coordinate=coord,
            policy=policy,
        )
