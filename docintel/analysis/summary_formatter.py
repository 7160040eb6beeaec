"""Composes the language-tagged summary text of a local analysis."""

from docintel.features.models import TextFeatures

LABELS: dict[str, dict[str, str]] = {
    "en": {
        "heading": "Document Analysis",
        "type": "Type",
        "priority": "Priority",
        "summary": "Summary",
        "key_terms": "Key Terms",
        "safety": "Safety Elements",
        "compliance": "Compliance Elements",
        "key_points": "Key Points",
    },
    "ml": {
        "heading": "ഡോക്യുമെന്റ് വിശകലനം",
        "type": "തരം",
        "priority": "പ്രാധാന്യം",
        "summary": "സംഗ്രഹം",
        "key_terms": "പ്രധാന പദങ്ങൾ",
        "safety": "സുരക്ഷാ ഘടകങ്ങൾ",
        "compliance": "കംപ്ലയൻസ് ഘടകങ്ങൾ",
        "key_points": "പ്രധാന പോയിന്റുകൾ",
    },
}

MALAYALAM_TYPES = {
    "Safety": "സുരക്ഷാ ഡോക്യുമെന്റ്",
    "Maintenance": "പരിപാലന ഡോക്യുമെന്റ്",
    "Operations": "പ്രവർത്തന ഡോക്യുമെന്റ്",
    "Finance": "ധനകാര്യ ഡോക്യുമെന്റ്",
    "HR": "എച്ച്.ആർ. ഡോക്യുമെന്റ്",
    "Compliance": "കംപ്ലയൻസ് ഡോക്യുമെന്റ്",
    "Technical": "സാങ്കേതിക ഡോക്യുമെന്റ്",
    "Administrative": "ഭരണപരമായ ഡോക്യുമെന്റ്",
    "General": "പൊതു ഡോക്യുമെന്റ്",
}

MALAYALAM_PRIORITIES = {
    "Critical": "നിർണായകം",
    "High": "ഉയർന്ന പ്രാധാന്യം",
    "Medium": "ഇടത്തരം പ്രാധാന്യം",
    "Low": "കുറഞ്ഞ പ്രാധാന്യം",
}

MAX_LISTED_TERMS = 10


def format_summary(
    features: TextFeatures,
    file_name: str,
    language: str = "en",
    body: str | None = None,
) -> str:
    """Render the summary block.

    With ``body`` (a model or extractive summary) it is placed under the
    summary label; without one, the important sentences are listed as key
    points instead.
    """
    labels = LABELS.get(language, LABELS["en"])
    if language == "ml":
        doc_type = MALAYALAM_TYPES.get(features.document_type, features.document_type)
        priority = MALAYALAM_PRIORITIES.get(features.priority, features.priority)
    else:
        doc_type = f"{features.document_type} Document"
        priority = features.priority

    lines = [
        f"{labels['heading']}: {file_name}",
        "",
        f"{labels['type']}: {doc_type}",
        f"{labels['priority']}: {priority}",
        "",
    ]
    if body:
        lines += [f"{labels['summary']}:", body, ""]
    if features.key_terms:
        lines += [f"{labels['key_terms']}: {', '.join(features.key_terms[:MAX_LISTED_TERMS])}", ""]
    if features.safety_info:
        lines += [f"{labels['safety']}: {', '.join(features.safety_info)}", ""]
    if features.compliance_info:
        lines += [f"{labels['compliance']}: {', '.join(features.compliance_info)}", ""]
    if not body and features.important_sentences:
        lines.append(f"{labels['key_points']}:")
        lines += [
            f"{index}. {sentence.strip()}"
            for index, sentence in enumerate(features.important_sentences, start=1)
        ]
    return "\n".join(lines).strip()
