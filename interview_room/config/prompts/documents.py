"""
Document conversion prompts.
"""

PDF_TO_MARKDOWN_PROMPT = (
    "Read the contents of the PDF given to you. Organize and convert it to markdown format."
)
