"""
Request/response schemas for the AI flows.

Design Decisions:
- Pydantic BaseModel for runtime validation of LLM JSON output
- snake_case attributes with camelCase aliases (the JSON keys the prompts ask
  for); populate_by_name lets either form validate
- Descriptions double as the field documentation rendered into prompts

Why These Models:
- An LLM can drop or rename keys; validating here turns a malformed answer
  into an LLMResponseError at the flow boundary instead of a KeyError deep in
  report rendering
- The detailed analysis is nested by framework part so reports can iterate
  parts and fields uniformly
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class FlowModel(BaseModel):
    """Base for flow schemas: camelCase wire names, snake_case attributes."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# =============================================================================
# BILL SUMMARIZATION
# =============================================================================

class SummarizeBillInput(FlowModel):
    bill_text: str = Field(..., description="The text content of the bill to be summarized.")
    congress_number: str = Field(..., description="The number of the congress that enacted the bill (e.g., 18th, 19th).")
    bill_number: str = Field(..., description="The bill number (e.g., HB1234, SB5678).")


class SummarizeBillOutput(FlowModel):
    summary: str = Field(..., description="A concise summary of the bill, highlighting key provisions and potential impacts.")


# =============================================================================
# BILL COMPARISON
# =============================================================================

class BillComparisonInput(FlowModel):
    bill1_summary: str = Field(..., description="Summary of the first bill.")
    bill2_summary: str = Field(..., description="Summary of the second bill.")


class BillComparisonOutput(FlowModel):
    similarities: str = Field(..., description="Similarities between the two bills.")
    differences: str = Field(..., description="Differences between the two bills.")
    potential_conflicts: str = Field(..., description="Potential conflicts between the two bills.")
    regulatory_impact_assessment_bill1: str = Field(
        ...,
        description='A detailed draft comment assessing the potential impact of Bill 1 on SEC regulations. '
                    'If no impact, explicitly state "No significant SEC regulatory impact identified for Bill 1."',
    )
    regulatory_impact_assessment_bill2: str = Field(
        ...,
        description='A detailed draft comment assessing the potential impact of Bill 2 on SEC regulations. '
                    'If no impact, explicitly state "No significant SEC regulatory impact identified for Bill 2."',
    )


# =============================================================================
# REGULATORY IMPACT ASSESSMENT
# =============================================================================

class RegulatoryImpactAssessmentInput(FlowModel):
    bill_comparison: str = Field(
        ...,
        description="The comparison of two bills, including similarities, differences, and potential conflicts.",
    )


class RegulatoryImpactAssessmentOutput(FlowModel):
    impact_assessment: str = Field(..., description="An assessment of the potential impact on SEC regulations.")
    draft_comment: str = Field(..., description="A draft comment regarding the potential impact on SEC regulations.")


# =============================================================================
# DETAILED SEC BILL ANALYSIS
# =============================================================================

class DetailedSECBillAnalysisInput(FlowModel):
    bill_text: str = Field(..., description="The full text content of the bill to be analyzed.")
    bill_title: Optional[str] = Field(None, description="The official title of the bill, if known.")
    bill_number: Optional[str] = Field(None, description="The bill number (e.g., HB1234, S.567), if known.")
    legislative_chamber: Optional[str] = Field(None, description="The legislative chamber (House/Senate), if known.")


class BillIdentification(FlowModel):
    full_title: str = Field(..., description="The full title of the bill.")
    bill_number: str = Field(..., description="The bill number.")
    legislative_chamber: str = Field(..., description="The legislative chamber (House/Senate).")
    primary_sponsors: str = Field(..., description="Comma-separated list of primary sponsor(s), or 'Not specified'.")
    date_of_introduction: str = Field(..., description="Date of introduction, or 'Not specified'.")
    current_status: str = Field(..., description="Current status in the legislative process, or 'Not specified'.")
    related_bills: str = Field(..., description="Comma-separated list of related or companion bills, or 'None identified'.")


class ExecutiveSummary(FlowModel):
    main_objectives_and_key_provisions: str = Field(
        ..., description="Summary of the bill's main objectives and key provisions in plain language."
    )
    significant_changes_or_new_mechanisms: List[str] = Field(
        ..., description="List of 3-5 most significant changes or new mechanisms introduced by the bill."
    )


class RegulatoryImpactAndSECRelations(FlowModel):
    provisions_affecting_sec: str = Field(
        ...,
        alias="provisionsAffectingSEC",
        description="Identification of provisions directly or indirectly affecting the Philippine SEC, its regulatory "
                    "scope, or the capital markets, citing specific bill provisions where possible.",
    )
    impacted_laws_and_regulations: str = Field(
        ...,
        description="Specification of existing laws, rules, or SEC regulations that would be amended, repealed, "
                    "or impacted, citing specific sections.",
    )
    new_sec_regulatory_obligations: str = Field(
        ...,
        alias="newSECRegulatoryObligations",
        description="Assessment of whether the bill creates new regulatory obligations, reporting requirements, "
                    "or oversight functions for the SEC.",
    )
    conflicts_with_src_and_sec_laws: str = Field(
        ...,
        alias="conflictsWithSRCAndSECLaws",
        description="Analysis of potential conflicts, overlaps, or inconsistencies with the Securities Regulation "
                    "Code (SRC), its IRR, or other SEC-administered laws.",
    )


class LegalAndConstitutionalAnalysis(FlowModel):
    potential_legal_or_constitutional_issues: str = Field(
        ..., description="Identification of any potential legal or constitutional issues raised by the bill."
    )
    language_clarity_and_ambiguities: str = Field(
        ...,
        description="Analysis of the clarity of the bill's language and any ambiguities that may hinder "
                    "implementation or enforcement.",
    )
    sunset_provisions_accountability_and_reporting: str = Field(
        ...,
        description="Notes on any sunset provisions, accountability measures, or reporting requirements found in "
                    "the bill, or 'None identified'.",
    )


class StakeholderImpact(FlowModel):
    affected_sectors_industries_groups: str = Field(
        ...,
        description="Identification of which sectors, industries, or groups (including market participants, "
                    "investors, listed companies, SROs, etc.) are directly affected.",
    )
    potential_benefits_or_disadvantages: str = Field(
        ..., description="Assessment of potential benefits or disadvantages for these stakeholders."
    )
    compliance_burdens_or_regulatory_risks: str = Field(
        ..., description="Highlight of any provisions that may create compliance burdens or regulatory risks."
    )


class GovernanceAndEnforcement(FlowModel):
    shift_in_regulatory_powers: str = Field(
        ...,
        description="Analysis of how the bill may shift regulatory powers or responsibilities between the SEC and "
                    "other government agencies or SROs.",
    )
    avenues_for_arbitrage_abuse_unintended_consequences: str = Field(
        ...,
        description="Identification of possible avenues for regulatory arbitrage, abuse, or unintended consequences.",
    )
    adequacy_of_enforcement_penalties_dispute_resolution: str = Field(
        ...,
        description="Assessment of the adequacy of enforcement, penalties, and dispute resolution mechanisms in the bill.",
    )


class RecommendationsAndFurtherQuestions(FlowModel):
    key_questions_for_sec_investigation: List[str] = Field(
        ...,
        alias="keyQuestionsForSECInvestigation",
        description="List of 3-5 key questions or areas for further investigation relevant to the SEC.",
    )
    process_irregularities_urgent_issues_expert_perspectives: str = Field(
        ..., description="Highlight of any process irregularities, urgent issues, or expert perspectives needed."
    )
    precedents_historical_context_international_practices: str = Field(
        ...,
        description="Notes on important precedents, historical context, or comparative international practices "
                    "that may inform the analysis.",
    )


class DetailedSECBillAnalysisOutput(FlowModel):
    """Seven-part SEC regulatory analysis of a single bill."""
    part1_bill_identification: BillIdentification = Field(
        ..., description="Part 1: Bill Identification Details"
    )
    part2_executive_summary: ExecutiveSummary = Field(
        ..., description="Part 2: Executive Summary"
    )
    part3_regulatory_impact_and_sec_relations: RegulatoryImpactAndSECRelations = Field(
        ..., alias="part3RegulatoryImpactAndSECRelations", description="Part 3: Regulatory Impact & SEC Relations"
    )
    part4_legal_and_constitutional_analysis: LegalAndConstitutionalAnalysis = Field(
        ..., description="Part 4: Legal & Constitutional Analysis"
    )
    part5_stakeholder_impact: StakeholderImpact = Field(
        ..., description="Part 5: Stakeholder Impact"
    )
    part6_governance_and_enforcement: GovernanceAndEnforcement = Field(
        ..., description="Part 6: Governance & Enforcement"
    )
    part7_recommendations_and_further_questions: RecommendationsAndFurtherQuestions = Field(
        ..., description="Part 7: Recommendations & Further Questions"
    )
