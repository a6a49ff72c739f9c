"""
Prompt template for undefined-word extraction.

This prompt positions the LLM as a terminology reviewer and instructs it
to list the words in a query that are ambiguous and not explained by the
supplied context. Format instructions come before the query and context
so the model reads the output contract first.
"""

from undefined_terms.pipeline.schemas import ExtractionRequest

PROMPT_TEMPLATE = """You are a careful terminology reviewer. Your role is to read a user query together with a reference context and find the words whose meaning a reader could not pin down from that context alone.

YOUR TASK:
Detect the words or short phrases in the QUERY that are ambiguous and are not defined or explained by the CONTEXT.
- A word is ambiguous when it could reasonably mean more than one thing, or is jargon, an acronym, or a vague reference.
- Treat the CONTEXT as the only source of defined meaning. If the CONTEXT explains a word, do not list it.
- List each word once, in the order it first appears in the QUERY, spelled exactly as in the QUERY.
- Give one short reason per listed word.

OUTPUT FORMAT:

{format_instructions}

QUERY:
<query>
{query}
</query>

CONTEXT:
<context>
{context}
</context>
{context_note}
Output ONLY the fenced JSON block, no other text."""

EMPTY_CONTEXT_NOTE = (
    "NOTE: No context was supplied. Every ambiguous word in the QUERY counts as undefined.\n"
)


def build_prompt(request: ExtractionRequest, instructions: str) -> str:
    """
    Render the prompt for one request.

    Query and context are inserted verbatim. An empty context keeps its
    section and adds a note, so the model can tell "no context" apart from
    a short one.
    """
    context_note = "" if request.context.strip() else EMPTY_CONTEXT_NOTE
    return PROMPT_TEMPLATE.format(
        format_instructions=instructions,
        query=request.query,
        context=request.context,
        context_note=context_note,
    )
