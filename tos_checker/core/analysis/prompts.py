"""
Prompt templates for terms-and-conditions analysis.

Two prompts: one applied to every chunk, one that merges the chunk
findings into a single organized summary.

Dependencies: langchain_core.prompts
System role: Prompt templates for the analysis pipeline
"""

from langchain_core.prompts import PromptTemplate

CHUNK_ANALYSIS_TEMPLATE = """You are a helpful assistant that warns users about cautions hidden in a website's Terms and Conditions.

Analyze this section of the terms and conditions for:
- flaws and one-sided clauses
- unclear or ambiguous language
- data collection, sharing and retention risks
- security concerns

If you find any issues, list them clearly, one per line, quoting the relevant wording.
If the section contains nothing worth flagging, reply with an empty message.

Section to analyze:
{chunk}"""

SUMMARY_TEMPLATE = """Below are analyses of different sections of one terms and conditions document.

Provide a clear, organized summary of all the key issues and concerns found.
Group related issues under short headings, put the most serious concerns first,
and drop duplicates.

Section analyses:
{findings}"""

CHUNK_ANALYSIS_PROMPT = PromptTemplate.from_template(CHUNK_ANALYSIS_TEMPLATE)
SUMMARY_PROMPT = PromptTemplate.from_template(SUMMARY_TEMPLATE)
