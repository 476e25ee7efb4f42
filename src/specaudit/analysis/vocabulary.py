"""Word lists driving the detectors.

Passed into the scanner and passes as immutable configuration. The
acronym skip-list is hand-maintained: unlisted domain acronyms are
reported as undefined terms, and that is accepted behavior.
"""

from __future__ import annotations

from dataclasses import dataclass

from specaudit.constants import AmbiguityCategory


@dataclass(frozen=True)
class AnalysisVocabulary:
    """Fixed vocabularies consumed by the detectors."""

    # Taxonomy in priority order (index 0 sorts first)
    taxonomy: tuple[AmbiguityCategory, ...] = tuple(AmbiguityCategory)
    vague_quantifiers: tuple[str, ...] = (
        "some",
        "many",
        "few",
        "several",
        "various",
        "often",
        "sometimes",
        "usually",
        "frequently",
        "rarely",
        "approximately",
        "roughly",
        "might",
        "maybe",
        "possibly",
        "probably",
        "fast",
        "quickly",
        "soon",
        "reasonable",
        "appropriate",
        "adequate",
        "sufficient",
        "etc",
        "as needed",
    )
    acronym_skip_list: frozenset[str] = frozenset({
        # RFC 2119 keywords
        "MUST", "SHALL", "SHOULD", "MAY", "NOT", "REQUIRED",
        "OPTIONAL", "RECOMMENDED",
        # Marker and placeholder tokens
        "NEEDS", "CLARIFICATION", "RESOLVED", "TODO", "TBD", "FIXME",
        "XXX", "HACK", "NOTE", "WARNING", "IMPORTANT",
        # Requirement identifiers
        "NFR", "REQ", "MVP",
        # Protocols and formats
        "API", "REST", "HTTP", "HTTPS", "URL", "URI", "JSON", "XML",
        "YAML", "TOML", "HTML", "CSS", "SQL", "CSV", "PDF", "UTF",
        "ASCII", "TCP", "UDP", "DNS", "TLS", "SSL", "SSH", "SMTP",
        "GRPC", "MCP", "JWT", "UUID", "UTC", "ISO",
        # Tooling and platforms
        "CLI", "SDK", "IDE", "CRUD", "ORM", "AWS", "GCP", "CPU",
        "GPU", "RAM", "SSO", "LLM",
        # Governance
        "GDPR", "WCAG", "SLA", "SLO", "RBAC", "CORS", "OWASP",
    })
    placeholder_tokens: tuple[str, ...] = (
        "TODO",
        "TBD",
        "FIXME",
        "XXX",
    )
    constitution_keys: tuple[str, ...] = (
        "language",
        "framework",
        "storage",
        "testing",
    )
    # Values that mean "not decided yet" in a constitution declaration
    undecided_values: frozenset[str] = frozenset({
        "", "tbd", "todo", "n/a", "na", "none", "unknown", "-",
    })

    def priority(self, category: AmbiguityCategory) -> int:
        """Position of *category* in the taxonomy; unknown sorts last."""
        try:
            return self.taxonomy.index(category)
        except ValueError:
            return len(self.taxonomy)


DEFAULT_VOCABULARY = AnalysisVocabulary()
