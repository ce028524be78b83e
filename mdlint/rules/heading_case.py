"""Sentence case checking for headings."""

from __future__ import annotations

import re

from mdlint.document.blocks import find_headings
from mdlint.rules.base import BaseRule, LintContext
from mdlint.rules.schemas import LintIssue, LintSeverity

# Proper nouns and product names that keep their capital letter
DEFAULT_ALLOWED_WORDS = (
    # Languages
    "JavaScript", "TypeScript", "Python", "Java", "Ruby", "PHP", "Go", "Rust",
    "Swift", "Kotlin", "Scala", "Perl", "Haskell", "Elixir", "Erlang",
    "Clojure", "Lua",
    # Platforms and tools
    "GitHub", "GitLab", "Bitbucket", "npm", "Yarn", "Deno", "Node", "Bun",
    "Docker", "Kubernetes", "Linux", "macOS", "Windows", "iOS", "Android",
    "Unix",
    # Frameworks
    "React", "Vue", "Angular", "Svelte", "Next", "Nuxt", "Express", "Django",
    "Flask", "Rails", "Laravel", "Spring",
    # Databases
    "PostgreSQL", "MySQL", "MongoDB", "Redis", "SQLite", "Elasticsearch",
    # Protocols and formats
    "HTTP", "HTTPS", "HTML", "CSS", "JSON", "XML", "YAML", "TOML", "REST",
    "GraphQL", "OAuth", "JWT", "ActivityPub", "WebFinger",
    # Companies and services
    "Google", "Microsoft", "Apple", "Amazon", "AWS", "Azure", "OpenAI",
    "Actions", "Mastodon", "Misskey",
)

CODE_SPAN_PATTERN = re.compile(r"`[^`]+`")
INLINE_LINK_PATTERN = re.compile(r"\[([^\]]+)\]\([^)]+\)")
REFERENCE_LINK_PATTERN = re.compile(r"\[([^\]]+)\]\[[^\]]*\]")
EMPHASIS_PATTERN = re.compile(r"[*_]+")
WORD_PATTERN = re.compile(r"^[\W\d_]*([^\W\d_]+)[\W\d_]*$")


def strip_inline_markup(text: str) -> str:
    """Reduce heading text to its plain words."""
    text = CODE_SPAN_PATTERN.sub("", text)
    text = INLINE_LINK_PATTERN.sub(r"\1", text)
    text = REFERENCE_LINK_PATTERN.sub(r"\1", text)
    return EMPHASIS_PATTERN.sub("", text)


class HeadingCaseRule(BaseRule):
    """Headings use sentence case.

    Only the first word and proper nouns are capitalized. Capitalized words
    are reported unless they are in the allowed list or, with
    ``ignore_acronyms``, written in all caps.
    """

    rule_id = "HM005"
    name = "heading-sentence-case"
    description = "Headings should use sentence case"
    tags = ("headings", "case")
    severity = LintSeverity.WARNING
    default_options = {"allowed_words": [], "ignore_acronyms": True}

    def check(self, context: LintContext) -> list[LintIssue]:
        """Check the words of every heading."""
        allowed = {word.lower() for word in DEFAULT_ALLOWED_WORDS}
        allowed.update(word.lower() for word in self.option(context, "allowed_words"))
        ignore_acronyms = self.option(context, "ignore_acronyms")

        issues = []
        for heading in find_headings(context.classified):
            capitalized = self.capitalized_words(heading.text, allowed, ignore_acronyms)
            if capitalized:
                issues.append(self.issue(
                    context,
                    heading.line_number,
                    f"Capitalized word(s) may violate sentence case: {', '.join(capitalized)}",
                    excerpt=heading.text,
                ))
        return issues

    def capitalized_words(self, text: str, allowed: set[str], ignore_acronyms: bool = True) -> list[str]:
        """Find capitalized words after the first one that are not allowed."""
        words = strip_inline_markup(text).split()
        found = []

        for word in words[1:]:
            match = WORD_PATTERN.match(word)
            # Punctuation-only tokens and mixed tokens such as "foo-bar"
            if match is None:
                continue

            word = match.group(1)
            if not word[0].isupper():
                continue
            if word.lower() in allowed:
                continue
            if ignore_acronyms and word.isupper():
                continue

            found.append(word)

        return found
