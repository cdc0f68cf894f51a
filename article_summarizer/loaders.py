from __future__ import annotations
import re

SUPPORTED_EXTENSIONS = ("txt", "md", "rtf")

def extract_rtf_text(rtf_content: str) -> str:
    """Extract plain text from RTF content, keeping paragraph breaks."""
    text = re.sub(r'\\par(?![a-z])', '\n\n', rtf_content)
    # Remove RTF control words and groups
    text = re.sub(r'\\\*.*?;', '', text)
    text = re.sub(r'\\[a-z]+-?\d* ?', '', text)
    text = re.sub(r'\\[^a-z\n]', '', text)
    text = re.sub(r'[{}]', '', text)
    text = re.sub(r'[ \t]+', ' ', text)
    return re.sub(r'\n\s*\n', '\n\n', text).strip()

def extract_markdown_text(md_content: str) -> str:
    """Extract plain text from Markdown content."""
    # Remove code blocks first so their contents don't leak into sentences
    text = re.sub(r'```.*?```', '', md_content, flags=re.DOTALL)
    # Remove headers
    text = re.sub(r'^#{1,6}\s+', '', text, flags=re.MULTILINE)
    # Remove bold and italic
    text = re.sub(r'\*{1,2}(.*?)\*{1,2}', r'\1', text)
    text = re.sub(r'_{1,2}(.*?)_{1,2}', r'\1', text)
    # Remove links
    text = re.sub(r'\[([^\]]+)\]\([^)]+\)', r'\1', text)
    # Remove horizontal rules
    text = re.sub(r'^-{3,}$', '', text, flags=re.MULTILINE)
    # Blank lines are paragraph breaks for the segmenter, keep exactly one
    text = re.sub(r'\n\s*\n', '\n\n', text)
    return text.strip()

def load_text(name: str, raw: bytes) -> str:
    """Decode an uploaded file and strip markup according to its extension."""
    extension = name.lower().rsplit('.', 1)[-1]
    content = raw.decode("utf-8", errors="replace")

    if extension == 'rtf':
        return extract_rtf_text(content)
    elif extension == 'md':
        return extract_markdown_text(content)
    else:  # txt and other formats
        return content
