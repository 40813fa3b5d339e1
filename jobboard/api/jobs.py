from __future__ import annotations

import logging

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from ..common.errors import InvalidInputError
from ..jobs.db_operations import JobDB
from .schemas import JobNew, JobSearch, JobUpdate

logger = logging.getLogger(__name__)

bp = Blueprint("jobs", __name__)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _job_db() -> JobDB:
    return current_app.extensions["job_db"]


def _job_fields(job: dict) -> dict:
    return {
        "id": job["id"],
        "title": job["title"],
        "salary": job["salary"],
        "equity": job["equity"],
        "companyHandle": job["company_handle"],
    }


def _validation_message(exc: ValidationError) -> str:
    problems = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err["loc"])
        problems.append(f"{location}: {err['msg']}" if location else err["msg"])
    return "; ".join(problems)


def _parse(schema, data):
    if not isinstance(data, dict):
        raise InvalidInputError("Request body must be a JSON object")
    try:
        return schema.model_validate(data)
    except ValidationError as exc:
        raise InvalidInputError(_validation_message(exc)) from exc


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------

@bp.post("/jobs")
def create_job():
    new_job = _parse(JobNew, request.get_json(silent=True))
    job = _job_db().create(
        title=new_job.title,
        salary=new_job.salary,
        equity=new_job.equity,
        company_handle=new_job.company_handle,
    )
    return jsonify({"job": _job_fields(job)}), 201


@bp.get("/jobs")
def list_jobs():
    search = _parse(JobSearch, request.args.to_dict())
    jobs = _job_db().find_all(search.to_filter())
    return jsonify({"jobs": [_job_fields(j) for j in jobs]})


@bp.get("/jobs/<int:job_id>")
def get_job(job_id):
    job = _job_db().get(job_id)
    return jsonify({"job": _job_fields(job)})


@bp.patch("/jobs/<int:job_id>")
def update_job(job_id):
    changes = _parse(JobUpdate, request.get_json(silent=True)).changes()
    job = _job_db().update(job_id, changes)
    return jsonify({"job": _job_fields(job)})


@bp.delete("/jobs/<int:job_id>")
def delete_job(job_id):
    _job_db().remove(job_id)
    return jsonify({"deleted": str(job_id)})
