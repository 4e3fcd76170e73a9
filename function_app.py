import json
import logging

import azure.functions as func

from legislate_core.api.bill_source import generate_mock_bill_text
from legislate_core.config import load_config
from legislate_core.exceptions import InputError, LegislateError
from legislate_core.inputs import BillDetails
from legislate_core.pipeline import BillPipeline

app = func.FunctionApp()


def _json_response(payload: dict, status_code: int = 200) -> func.HttpResponse:
    return func.HttpResponse(
        json.dumps(payload),
        status_code=status_code,
        mimetype="application/json",
    )


def handle_fetch_bill_data(req: func.HttpRequest) -> func.HttpResponse:
    """
    Simulated bill text lookup.

    Query: congress, billNumber, keyword (all optional).
    Returns {"billText": ...}; there is no real scraping behind it.
    """
    congress = req.params.get("congress") or "N/A"
    bill_number = req.params.get("billNumber") or "N/A"
    keyword = req.params.get("keyword") or None

    bill_text = generate_mock_bill_text(congress, bill_number, keyword)
    if not bill_text:
        return _json_response({"error": "Bill not found or unable to fetch text."}, status_code=404)
    return _json_response({"billText": bill_text})


def handle_process_bills(req: func.HttpRequest, pipeline: BillPipeline | None = None) -> func.HttpResponse:
    """
    Run the analysis pipeline on a JSON submission.

    Body: {"bill1": {...BillDetails}, "bill2": {...}, "keyword": "..."}
    """
    try:
        body = req.get_json()
    except ValueError:
        return _json_response({"error": "Request body must be JSON."}, status_code=400)
    if not isinstance(body, dict):
        return _json_response({"error": "Request body must be a JSON object."}, status_code=400)

    try:
        bill1 = BillDetails.model_validate(body.get("bill1") or {})
        bill2 = BillDetails.model_validate(body.get("bill2") or {})
    except ValueError as e:
        return _json_response({"error": f"Invalid bill details: {e}"}, status_code=400)

    keyword = body.get("keyword") or ""
    if not isinstance(keyword, str):
        return _json_response({"error": "keyword must be a string."}, status_code=400)

    pipeline = pipeline or BillPipeline.from_config(load_config())
    try:
        result = pipeline.process(bill1, bill2, keyword)
    except InputError as e:
        return _json_response({"error": str(e)}, status_code=400)
    except LegislateError as e:
        logging.error('Error processing bills: %s', str(e))
        return _json_response({"error": f"Failed to process bills. {e}"}, status_code=502)

    return func.HttpResponse(
        result.model_dump_json(by_alias=True),
        status_code=200,
        mimetype="application/json",
    )


# pylint: disable=invalid-name
@app.route(route="fetch-bill-data", methods=["GET"], auth_level=func.AuthLevel.ANONYMOUS)
def FetchBillData(req: func.HttpRequest) -> func.HttpResponse:
    """
    HTTP trigger serving simulated bill text
    Call via: https://<app-name>.azurewebsites.net/api/fetch-bill-data?congress=19&billNumber=SBN-1234
    """
    logging.info('Bill data requested: %s', req.url)
    return handle_fetch_bill_data(req)


# pylint: disable=invalid-name
@app.route(route="process-bills", methods=["POST"], auth_level=func.AuthLevel.FUNCTION)
def ProcessBills(req: func.HttpRequest) -> func.HttpResponse:
    """
    HTTP trigger running summaries, comparison or detailed analysis
    Call via: https://<app-name>.azurewebsites.net/api/process-bills?code=<function-key>
    """
    logging.info('Process bills invoked by: %s', req.url)
    return handle_process_bills(req)
