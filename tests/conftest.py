"""
Pytest fixtures and configuration.

- Fixtures provide realistic LLM payloads in the camelCase shape the prompts
  request
- LLM clients are MagicMocks shaped like the OpenAI / google-genai responses
- No test touches the network
"""
import json
from typing import Any
from unittest.mock import MagicMock

import pytest


# =============================================================================
# LLM RESPONSE FIXTURES
# =============================================================================

@pytest.fixture
def summary_response() -> dict[str, Any]:
    return {
        "summary": "The bill establishes a National Digital Assets Council and amends Republic Act No. 8799 "
                   "to cover crypto-asset service providers."
    }


@pytest.fixture
def comparison_response() -> dict[str, Any]:
    """Valid BillComparisonOutput payload."""
    return {
        "similarities": "Both bills create a registration regime for digital asset exchanges.",
        "differences": "House Bill No. 4664 places oversight with the BSP; SBN 1234 keeps it with the SEC.",
        "potentialConflicts": "Overlapping licensing requirements under RA 8799.",
        "regulatoryImpactAssessmentBill1": "The Senate Version expands SEC registration duties.",
        "regulatoryImpactAssessmentBill2": "No significant SEC regulatory impact identified for Bill 2.",
    }


@pytest.fixture
def impact_response() -> dict[str, Any]:
    return {
        "impactAssessment": "The bills would require amendments to the SRC IRR.",
        "draftComment": "The Commission respectfully recommends harmonizing Section 4 of both versions.",
    }


@pytest.fixture
def detailed_analysis_response() -> dict[str, Any]:
    """Valid DetailedSECBillAnalysisOutput payload, as a model would return it."""
    return {
        "part1BillIdentification": {
            "fullTitle": "An Act Regulating Digital Asset Service Providers",
            "billNumber": "SBN 1234",
            "legislativeChamber": "Senate",
            "primarySponsors": "Sen. Santos, Sen. Reyes",
            "dateOfIntroduction": "Not specified",
            "currentStatus": "Pending in Committee",
            "relatedBills": "House Bill No. 4664",
        },
        "part2ExecutiveSummary": {
            "mainObjectivesAndKeyProvisions": "Creates a licensing regime for digital asset service providers.",
            "significantChangesOrNewMechanisms": [
                "Mandatory SEC registration of exchanges",
                "Amends R.A. No. 8799 Section 3",
                "Creates a National Digital Assets Council",
            ],
        },
        "part3RegulatoryImpactAndSECRelations": {
            "provisionsAffectingSEC": "Section 4 grants the SEC rule-making power over exchanges.",
            "impactedLawsAndRegulations": "RA 8799 and the 2015 SRC IRR.",
            "newSECRegulatoryObligations": "Quarterly reporting to Congress.",
            "conflictsWithSRCAndSECLaws": "Possible overlap with RA 11232 on corporate registration.",
        },
        "part4LegalAndConstitutionalAnalysis": {
            "potentialLegalOrConstitutionalIssues": "Delegation of penal rule-making may be challenged.",
            "languageClarityAndAmbiguities": "'Digital asset' is defined broadly.",
            "sunsetProvisionsAccountabilityAndReporting": "None identified",
        },
        "part5StakeholderImpact": {
            "affectedSectorsIndustriesGroups": "Exchanges, brokers and retail investors.",
            "potentialBenefitsOrDisadvantages": "Investor protection against higher compliance cost.",
            "complianceBurdensOrRegulatoryRisks": "New capital requirements for exchanges.",
        },
        "part6GovernanceAndEnforcement": {
            "shiftInRegulatoryPowers": "Moves stablecoin oversight to the BSP.",
            "avenuesForArbitrageAbuseUnintendedConsequences": "Offshore exchanges may avoid registration.",
            "adequacyOfEnforcementPenaltiesDisputeResolution": "Penalties mirror the SRC.",
        },
        "part7RecommendationsAndFurtherQuestions": {
            "keyQuestionsForSECInvestigation": [
                "How will SBN 1234 interact with HB 4664?",
                "Does the SEC have budget for the new office?",
                "Should stablecoins be carved out?",
            ],
            "processIrregularitiesUrgentIssuesExpertPerspectives": "None identified",
            "precedentsHistoricalContextInternationalPractices": "Compare with Singapore's Payment Services Act.",
        },
    }


# =============================================================================
# MOCK CLIENT FIXTURES
# =============================================================================

def _openai_response(content: str | None) -> MagicMock:
    response = MagicMock()
    response.choices = [MagicMock()]
    response.choices[0].message.content = content
    return response


@pytest.fixture
def make_openai_client():
    """
    Factory for a mock OpenAI client.

    Each item is a dict (serialized as the JSON answer), a raw string, or an
    Exception raised by that call.
    """
    def factory(*answers: Any) -> MagicMock:
        side_effects = []
        for answer in answers:
            if isinstance(answer, Exception):
                side_effects.append(answer)
            elif isinstance(answer, dict):
                side_effects.append(_openai_response(json.dumps(answer)))
            else:
                side_effects.append(_openai_response(answer))
        client = MagicMock()
        client.chat.completions.create.side_effect = side_effects
        return client
    return factory


@pytest.fixture
def make_gemini_response():
    """Factory for a mock google-genai response holding one JSON text part."""
    def factory(payload: dict[str, Any], text_attr: bool = True) -> MagicMock:
        json_text = json.dumps(payload)
        response = MagicMock()
        response.text = json_text if text_attr else None
        thought_part = MagicMock()
        thought_part.thought = True
        thought_part.text = "thinking..."
        text_part = MagicMock()
        text_part.thought = False
        text_part.text = json_text
        response.candidates = [MagicMock()]
        response.candidates[0].content.parts = [thought_part, text_part]
        return response
    return factory


@pytest.fixture
def sample_config() -> dict[str, Any]:
    """Config with retries that never sleep."""
    return {
        "llm": {
            "provider": "openai",
            "temperature": 0.0,
            "openai": {"model": "gpt-4o-mini"},
            "gemini": {"model": "gemini-2.0-flash"},
            "retry": {"max_retries": 2, "delay": 0.0, "backoff": 1.0},
        },
        "bill_source": {"base_url": "", "timeout": 5.0},
        "analysis": {"assess_comparison_impact": False},
    }
