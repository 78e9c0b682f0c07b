from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body, list_response, lookup_response, no_content
from ..container import Container
from .model import Application, JobPosting


def _serialize(record) -> dict:
    return record.to_dict()


def register(app: Flask, container: Container) -> None:
    jobs = container.recruitment_service
    applications = container.application_service

    # -------- Job postings --------
    @app.route("/recruitment/jobs", methods=["GET"], endpoint="list_job_postings")
    def list_job_postings():
        return list_response(jobs.list_job_postings(), _serialize)

    @app.route("/recruitment/jobs", methods=["POST"], endpoint="create_job_posting")
    def create_job_posting():
        posting = JobPosting.from_dict(json_body())
        return jsonify(_serialize(jobs.create_job_posting(posting)))

    @app.route("/recruitment/jobs/<record_id>", methods=["GET"], endpoint="get_job_posting")
    def get_job_posting(record_id: str):
        return lookup_response(jobs.get_job_posting(record_id), _serialize)

    @app.route("/recruitment/jobs/<record_id>", methods=["PUT"], endpoint="update_job_posting")
    def update_job_posting(record_id: str):
        posting = JobPosting.from_dict(json_body())
        return jsonify(_serialize(jobs.update_job_posting(record_id, posting)))

    @app.route("/recruitment/jobs/<record_id>", methods=["DELETE"], endpoint="delete_job_posting")
    def delete_job_posting(record_id: str):
        jobs.delete_job_posting(record_id)
        return no_content()

    @app.route("/recruitment/jobs/status/<status>", methods=["GET"], endpoint="job_postings_by_status")
    def jobs_by_status(status: str):
        return list_response(jobs.list_by_status(status), _serialize)

    @app.route("/recruitment/jobs/department/<department>", methods=["GET"], endpoint="job_postings_by_department")
    def jobs_by_department(department: str):
        return list_response(jobs.list_by_department(department), _serialize)

    @app.route(
        "/recruitment/jobs/employment-type/<employment_type>",
        methods=["GET"],
        endpoint="job_postings_by_employment_type",
    )
    def jobs_by_employment_type(employment_type: str):
        return list_response(jobs.list_by_employment_type(employment_type), _serialize)

    @app.route("/recruitment/jobs/posted-by/<posted_by>", methods=["GET"], endpoint="job_postings_by_poster")
    def jobs_by_poster(posted_by: str):
        return list_response(jobs.list_by_posted_by(posted_by), _serialize)

    @app.route("/recruitment/jobs/<record_id>/applications", methods=["GET"], endpoint="applications_for_job")
    def applications_for_job(record_id: str):
        return list_response(applications.list_by_job_posting(record_id), _serialize)

    # -------- Applications --------
    @app.route("/recruitment/applications", methods=["GET"], endpoint="list_applications")
    def list_applications():
        return list_response(applications.list_applications(), _serialize)

    @app.route("/recruitment/applications", methods=["POST"], endpoint="create_application")
    def create_application():
        application = Application.from_dict(json_body())
        return jsonify(_serialize(applications.create_application(application)))

    @app.route("/recruitment/applications/<record_id>", methods=["GET"], endpoint="get_application")
    def get_application(record_id: str):
        return lookup_response(applications.get_application(record_id), _serialize)

    @app.route("/recruitment/applications/<record_id>", methods=["PUT"], endpoint="update_application")
    def update_application(record_id: str):
        application = Application.from_dict(json_body())
        return jsonify(_serialize(applications.update_application(record_id, application)))

    @app.route("/recruitment/applications/<record_id>", methods=["DELETE"], endpoint="delete_application")
    def delete_application(record_id: str):
        applications.delete_application(record_id)
        return no_content()

    @app.route("/recruitment/applications/status/<status>", methods=["GET"], endpoint="applications_by_status")
    def applications_by_status(status: str):
        return list_response(applications.list_by_status(status), _serialize)
