"""Prompt templates."""

from demo_server.notes import NoteStore

NOTE_SEPARATOR = "\n\n---\n\n"
NOTHING_TO_SUMMARIZE = (
    "There are no notes to summarize. "
    "Please create some notes first using the create_note tool."
)


def helpful_assistant(task: str = "general assistance") -> str:
    return (
        "You are a helpful, friendly, and knowledgeable assistant. "
        f"Please help me with the following task:\n\n{task}\n\n"
        "Provide clear, accurate, and actionable guidance."
    )


def code_reviewer(language: str = "unknown", code: str = "") -> str:
    return (
        f"Please review the following {language} code and provide constructive feedback:\n\n"
        f"```{language}\n{code}\n```\n\n"
        "Consider:\n"
        "- Code quality and readability\n"
        "- Potential bugs or issues\n"
        "- Performance concerns\n"
        "- Best practices\n"
        "- Suggestions for improvement"
    )


def summarize_notes(store: NoteStore) -> str:
    if not len(store):
        return NOTHING_TO_SUMMARIZE

    notes_text = NOTE_SEPARATOR.join(
        f"**{note.title}** (ID: {note.id})\n{note.content}" for note in store.all()
    )
    return f"Please provide a concise summary of the following notes:\n\n{notes_text}"
