"""Prompt templates for release notes generation."""

from datetime import date
from typing import Dict, List, Optional

from gitrelnotes.models import CommitDetailBlob

SYSTEM_PROMPT = "You are a helpful assistant that generates release notes from commit messages."

DETAILS_HEADER = "--- Code changes (diff) ---"
DETAILS_DELIMITER = "---"


class PromptTemplates:
    """Prompt construction for user-facing release notes."""

    @staticmethod
    def format_commit_details(blobs: List[CommitDetailBlob]) -> str:
        """Concatenate commit detail blobs in order, each framed by delimiters.

        Args:
            blobs: Commit detail blobs in selection order

        Returns:
            Combined commit history text
        """
        return "\n".join(
            "\n".join([DETAILS_HEADER, blob.text, DETAILS_DELIMITER]) for blob in blobs
        )

    @staticmethod
    def release_notes(blobs: List[CommitDetailBlob], release_date: date) -> str:
        """Generate the release notes prompt.

        Categorization and filtering are left to the model; no commit content
        is dropped here.

        Args:
            blobs: Commit detail blobs in selection order
            release_date: Date printed under the release notes heading

        Returns:
            Formatted prompt
        """
        history = PromptTemplates.format_commit_details(blobs)

        return f"""
You will generate user-facing release notes in plain Markdown for non-technical end users.

Instructions:
- Read the commit history below and extract only items that matter to an end user of the application.
- Ignore developer-only changes such as: upgrading models or machine-learning artifacts, README or docs updates, CI/workflow changes, test changes, linting/style changes, pure refactors that do not change behavior, and dependency or build-tool bumps unless they directly change user-visible behavior.
- Include only: new features or enhancements users will notice, UI/UX changes, performance improvements that affect users, bug fixes that change observable behavior, and explicit breaking changes that require user action.
- Do not include any duplicates or near-duplicates.
- For each item, write one short, plain-language sentence (no technical jargon), starting with a verb when appropriate (e.g., "Users can now...", "Fixed an issue where...").
- Group items under these headings (omit any empty section):
  ### ⚠️ Breaking Changes
  ### ✨ New Features
  ### 🐛 Bug Fixes
  ### 📝 Other Changes (only include user-relevant things like support for new file types, integrations, or settings that users can change)
- If a section has no items, omit that section entirely. Do not create a section saying there are no changes of that kind.
- If a change is internal or not user-facing, skip it entirely.
- If nothing user-facing is present, return a short note: "No user-facing changes in this release." under the # Release Notes heading.
- Return ONLY Markdown content for the release notes. Do not add explanations, metadata, or commentary.

Git History:
{history}

# Release Notes

**Release Date:** {release_date.isoformat()}

"""

    @staticmethod
    def build_messages(
        blobs: List[CommitDetailBlob],
        release_date: Optional[date] = None,
    ) -> List[Dict[str, str]]:
        """Build the chat messages for one release notes request.

        Args:
            blobs: Commit detail blobs in selection order
            release_date: Release date, defaults to today

        Returns:
            System and user messages
        """
        return [
            {"role": "system", "content": SYSTEM_PROMPT},
            {
                "role": "user",
                "content": PromptTemplates.release_notes(blobs, release_date or date.today()),
            },
        ]
