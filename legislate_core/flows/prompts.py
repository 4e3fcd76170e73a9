"""
Prompt templates for the four AI flows.

Each template states the analyst role and the task, then ends with an output
contract: a JSON skeleton generated from the flow's response model, so the key
names the model is asked for always match what the schema validates.
"""
import json
import typing
from typing import Any, Type

from pydantic import BaseModel

from legislate_core.models import (
    BillComparisonInput,
    DetailedSECBillAnalysisInput,
    RegulatoryImpactAssessmentInput,
    SummarizeBillInput,
)

MAX_PROMPT_TEXT = 50000


def sanitize_for_prompt(text: str | None) -> str:
    """Sanitize external text before including in LLM prompt.

    Neutralizes code fences and role markers that could read as instructions.
    """
    if not text:
        return ""
    sanitized = text.replace("```", "'''")
    for marker in ("SYSTEM:", "USER:", "ASSISTANT:", "INSTRUCTION:"):
        sanitized = sanitized.replace(marker, f"[{marker[:-1]}]")
    if len(sanitized) > MAX_PROMPT_TEXT:
        sanitized = sanitized[:MAX_PROMPT_TEXT] + "... [truncated]"
    return sanitized


def _skeleton(model_cls: Type[BaseModel]) -> dict[str, Any]:
    skeleton: dict[str, Any] = {}
    for name, field in model_cls.model_fields.items():
        key = field.alias or name
        annotation = field.annotation
        if isinstance(annotation, type) and issubclass(annotation, BaseModel):
            skeleton[key] = _skeleton(annotation)
        elif typing.get_origin(annotation) is list:
            skeleton[key] = [field.description or "string"]
        else:
            skeleton[key] = field.description or "string"
    return skeleton


def output_contract(model_cls: Type[BaseModel]) -> str:
    """JSON output instructions for a response model."""
    return (
        "Respond ONLY with a JSON object using exactly these keys "
        "(values describe what each key must contain):\n"
        + json.dumps(_skeleton(model_cls), indent=2, ensure_ascii=False)
    )


SUMMARIZE_BILL_PROMPT = """You are an expert legal analyst tasked with summarizing congressional bills.

Given the text of a bill, provide a concise summary that highlights the key provisions and potential impacts of the bill.
Be sure to identify the context and purpose of the bill within the provided text.

Bill Text: {bill_text}
Congress Number: {congress_number}
Bill Number: {bill_number}

{output_contract}"""


BILL_COMPARISON_PROMPT = """You are an expert in comparing and contrasting legislative bills.

You will be provided with summaries of two bills. Your task is to identify the similarities, differences, and potential conflicts between them.
Additionally, assess the potential impact of each bill on SEC regulations and create a draft comment for each.

Bill 1 Summary: {bill1_summary}
Bill 2 Summary: {bill2_summary}

Analyze the bills and provide a detailed comparison, including:
- Similarities: Identify any common provisions, goals, or areas of focus.
- Differences: Highlight the distinct aspects of each bill, such as scope, approach, or specific requirements.
- Potential Conflicts: Determine if there are any areas where the bills might contradict or create inconsistencies if enacted together.
- Regulatory Impact Assessment Bill 1: Draft a comment that determines whether there might be an impact on the SEC's regulations for bill 1. If no impact, explicitly state 'No significant SEC regulatory impact identified for Bill 1.'
- Regulatory Impact Assessment Bill 2: Draft a comment that determines whether there might be an impact on the SEC's regulations for bill 2. If no impact, explicitly state 'No significant SEC regulatory impact identified for Bill 2.'

{output_contract}"""


REGULATORY_IMPACT_PROMPT = """You are an AI expert in SEC regulations. Given the following bill comparison, assess the potential impact on SEC regulations and draft an initial comment.

Bill Comparison:
{bill_comparison}

Consider any potential conflicts, overlaps, or implications for existing regulations. Provide a detailed impact assessment and a well-structured draft comment.

- impactAssessment: Your assessment of the impact on SEC regulations
- draftComment: A draft comment suitable for submission to the SEC

{output_contract}"""


DETAILED_SEC_ANALYSIS_PROMPT = """You are a lawyer at the Philippine Securities and Exchange Commission (SEC), specializing in legislative liaison and regulatory analysis. Your objective is to obtain a comprehensive, structured analysis of the following Philippine House or Senate bill, focusing on its potential regulatory impact, conflicts, and relations to the SEC and its implementing laws and regulations.

Please analyze the bill using the following detailed framework:

PART 1: BILL IDENTIFICATION
{title_line}
{number_line}
{chamber_line}
    Identify primary sponsor(s), date of introduction, and current status in the legislative process. If not in the text, state 'Not specified in provided text'.
    List any related or companion bills. If not in the text, state 'Not specified in provided text'.

PART 2: EXECUTIVE SUMMARY
    Summarize the bill's main objectives and key provisions in plain language.
    Identify the 3-5 most significant changes or new mechanisms introduced.

PART 3: REGULATORY IMPACT & SEC RELATIONS
    Identify any provisions that directly or indirectly affect the Philippine SEC, its regulatory scope, or the capital markets (e.g., securities, exchanges, SROs, market participants, corporate governance, public offerings, tender offers, shelf registration, etc.). Cite specific bill provisions or text where possible.
    Specify which existing laws, rules, or SEC regulations would be amended, repealed, or impacted. Cite specific bill provisions or text where possible.
    Assess whether the bill creates new regulatory obligations, reporting requirements, or oversight functions for the SEC.
    Highlight any potential conflicts, overlaps, or inconsistencies with the Securities Regulation Code (SRC), its IRR, or other SEC-administered laws (e.g., Corporation Code, Investment Company Act).

PART 4: LEGAL & CONSTITUTIONAL ANALYSIS
    Identify any potential legal or constitutional issues raised by the bill.
    Analyze the clarity of the bill's language and any ambiguities that may hinder implementation or enforcement.
    Note any sunset provisions, accountability measures, or reporting requirements. If none, state 'No specific sunset provisions, accountability measures, or reporting requirements identified in the text.'

PART 5: STAKEHOLDER IMPACT
    Identify which sectors, industries, or groups (including market participants, investors, listed companies, SROs, etc.) are directly affected.
    Assess potential benefits or disadvantages for these stakeholders.
    Highlight any provisions that may create compliance burdens or regulatory risks.

PART 6: GOVERNANCE & ENFORCEMENT
    Analyze how the bill may shift regulatory powers or responsibilities between the SEC and other government agencies or SROs.
    Identify possible avenues for regulatory arbitrage, abuse, or unintended consequences.
    Assess the adequacy of enforcement, penalties, and dispute resolution mechanisms.

PART 7: RECOMMENDATIONS & FURTHER QUESTIONS
    Suggest 3-5 key questions or areas for further investigation relevant to the SEC.
    Highlight any process irregularities, urgent issues, or expert perspectives needed.
    Note important precedents, historical context, or comparative international practices that may inform the analysis.

Instructions:
    For each section, cite specific bill provisions or text where possible.
    Maintain a non-partisan, objective, and evidence-based approach.
    Structure your output using clear headings and bullet points for readability as defined in the output schema. Ensure all fields in the output schema are populated.

{output_contract}

The full text of the bill is provided below:
{bill_text}
"""


def build_summarize_prompt(request: SummarizeBillInput, contract: str) -> str:
    return SUMMARIZE_BILL_PROMPT.format(
        bill_text=sanitize_for_prompt(request.bill_text),
        congress_number=sanitize_for_prompt(request.congress_number),
        bill_number=sanitize_for_prompt(request.bill_number),
        output_contract=contract,
    )


def build_comparison_prompt(request: BillComparisonInput, contract: str) -> str:
    return BILL_COMPARISON_PROMPT.format(
        bill1_summary=sanitize_for_prompt(request.bill1_summary),
        bill2_summary=sanitize_for_prompt(request.bill2_summary),
        output_contract=contract,
    )


def build_regulatory_impact_prompt(request: RegulatoryImpactAssessmentInput, contract: str) -> str:
    return REGULATORY_IMPACT_PROMPT.format(
        bill_comparison=sanitize_for_prompt(request.bill_comparison),
        output_contract=contract,
    )


def build_detailed_analysis_prompt(request: DetailedSECBillAnalysisInput, contract: str) -> str:
    """
    Render the seven-part framework prompt.

    Known title/number/chamber are stated to the model; unknown ones become
    instructions to derive them from the bill text.
    """
    if request.bill_title:
        title_line = f'The bill\'s title is stated as: "{sanitize_for_prompt(request.bill_title)}"'
    else:
        title_line = "Provide the full title based on the bill text."

    if request.bill_number:
        number_line = f"The bill number is stated as: {sanitize_for_prompt(request.bill_number)}."
    else:
        number_line = "Provide the bill number based on the bill text."

    if request.legislative_chamber:
        chamber_line = f"The legislative chamber is stated as: {sanitize_for_prompt(request.legislative_chamber)}."
    else:
        chamber_line = "Identify the legislative chamber (House/Senate) based on the bill text or number."

    return DETAILED_SEC_ANALYSIS_PROMPT.format(
        title_line=title_line,
        number_line=number_line,
        chamber_line=chamber_line,
        output_contract=contract,
        bill_text=sanitize_for_prompt(request.bill_text),
    )
