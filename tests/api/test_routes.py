from __future__ import annotations

import pytest


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.get_json() == {"status": "ok"}
    assert resp.headers["Access-Control-Allow-Origin"] == "*"


def test_cors_preflight_allows_json_writes(client):
    resp = client.options(
        "/leaves",
        headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "Content-Type",
        },
    )
    assert resp.status_code == 200
    assert resp.headers["Access-Control-Allow-Origin"] == "*"
    assert "POST" in resp.headers["Access-Control-Allow-Methods"]
    assert "content-type" in resp.headers["Access-Control-Allow-Headers"].lower()


# -------- Auth --------
def test_register_and_login(client):
    resp = client.post("/auth/register", json={"username": "alice", "email": "alice@x.io", "password": "pw"})
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["success"] is True
    assert body["user"]["username"] == "alice"
    assert "password" not in body["user"]

    resp = client.post("/auth/login", json={"username": "alice", "password": "pw"})
    assert resp.status_code == 200
    body = resp.get_json()
    assert body == {"success": True, "user": body["user"], "token": "mock-jwt-token"}
    assert "password" not in body["user"]


def test_register_duplicates_are_rejected(client):
    client.post("/auth/register", json={"username": "alice", "email": "alice@x.io", "password": "pw"})

    resp = client.post("/auth/register", json={"username": "alice", "email": "new@x.io", "password": "pw"})
    assert resp.status_code == 400
    assert resp.get_json() == {"success": False, "message": "Username already exists"}

    resp = client.post("/auth/register", json={"username": "bob", "email": "alice@x.io", "password": "pw"})
    assert resp.status_code == 400
    assert resp.get_json() == {"success": False, "message": "Email already exists"}


def test_login_failure(client):
    resp = client.post("/auth/login", json={"username": "ghost", "password": "pw"})
    assert resp.status_code == 400
    assert resp.get_json() == {"success": False, "message": "Invalid credentials"}

    resp = client.post("/auth/login", data="not json", content_type="text/plain")
    assert resp.status_code == 400


# -------- Leaves --------
def test_leave_lifecycle(client):
    created = client.post("/leaves", json={"employeeId": "E1", "leaveType": "ANNUAL", "startDate": "2026-03-02"})
    assert created.status_code == 200
    leave = created.get_json()
    assert leave["status"] == "PENDING"
    assert leave["startDate"] == "2026-03-02"

    resp = client.post(f"/leaves/{leave['id']}/approve", json={"approvedBy": "mgr1"})
    assert resp.status_code == 200
    assert resp.get_json()["status"] == "APPROVED"
    assert resp.get_json()["approvedBy"] == "mgr1"

    resp = client.post(f"/leaves/{leave['id']}/reject", json={"rejectedBy": "hr2", "comments": "overlap"})
    body = resp.get_json()
    assert (body["status"], body["approvedBy"], body["comments"]) == ("REJECTED", "hr2", "overlap")

    assert [x["id"] for x in client.get("/leaves/status/REJECTED").get_json()] == [leave["id"]]
    assert client.get("/leaves/status/PENDING").get_json() == []
    assert [x["id"] for x in client.get("/leaves/employee/E1").get_json()] == [leave["id"]]


def test_leave_decisions_on_unknown_id(client):
    assert client.post("/leaves/nope/approve", json={"approvedBy": "m"}).status_code == 404
    resp = client.post("/leaves/nope/reject", json={"rejectedBy": "m", "comments": "c"})
    assert resp.status_code == 404
    assert resp.data == b""


# -------- Payroll --------
def test_payroll_totals_are_server_computed(client):
    resp = client.post(
        "/payroll",
        json={
            "employeeId": "E1",
            "payPeriodStart": "2026-01-01",
            "payPeriodEnd": "2026-01-31",
            "basicSalary": 5000,
            "allowances": 500,
            "overtime": 200,
            "bonuses": 300,
            "taxDeduction": 600,
            "healthInsurance": 150,
            "retirementFund": 250,
            "otherDeductions": 0,
            "grossPay": 1,
            "totalDeductions": 1,
            "netPay": 1,
        },
    )
    assert resp.status_code == 200
    p = resp.get_json()
    assert (p["grossPay"], p["totalDeductions"], p["netPay"]) == (6000, 1000, 5000)
    assert p["status"] == "DRAFT"

    resp = client.put(f"/payroll/{p['id']}", json={**p, "bonuses": 0, "netPay": 123, "status": "PROCESSED"})
    u = resp.get_json()
    assert (u["grossPay"], u["netPay"], u["status"]) == (5700, 4700, "PROCESSED")
    assert u["createdAt"] == p["createdAt"]

    assert [x["id"] for x in client.get("/payroll/status/PROCESSED").get_json()] == [p["id"]]
    resp = client.get("/payroll/period?start=2026-01-01&end=2026-01-31")
    assert [x["id"] for x in resp.get_json()] == [p["id"]]


def test_payroll_bad_input(client):
    resp = client.post("/payroll", json={"basicSalary": "lots"})
    assert resp.status_code == 400
    assert resp.get_json()["success"] is False

    assert client.get("/payroll/pay-date?from=2026-01-01").status_code == 400
    assert client.get("/payroll/period?start=01/01/2026&end=2026-01-31").status_code == 400


@pytest.mark.parametrize("amount", ["NaN", "inf", "-Infinity", "1e400"])
def test_payroll_rejects_non_finite_amounts(client, amount):
    resp = client.post("/payroll", json={"basicSalary": 1000, "bonuses": amount})
    assert resp.status_code == 400
    assert resp.get_json()["success"] is False
    assert "must be a number" in resp.get_json()["message"]
    assert client.get("/payroll").get_json() == []


# -------- Recruitment --------
def test_job_postings(client):
    job = client.post("/recruitment/jobs", json={"title": "QA", "department": "IT", "skills": ["pytest"]}).get_json()
    assert job["status"] == "ACTIVE"
    client.post("/recruitment/jobs", json={"title": "Recruiter", "department": "HR", "status": "CLOSED"})

    assert [j["title"] for j in client.get("/recruitment/jobs/status/ACTIVE").get_json()] == ["QA"]
    assert [j["title"] for j in client.get("/recruitment/jobs/department/HR").get_json()] == ["Recruiter"]

    app_resp = client.post("/recruitment/applications", json={"jobPostingId": job["id"], "applicantName": "Ana"})
    assert app_resp.get_json()["status"] == "SUBMITTED"
    assert len(client.get(f"/recruitment/jobs/{job['id']}/applications").get_json()) == 1


# -------- Performance --------
def test_performance_routes(client):
    resp = client.post("/api/performance", json={"employeeId": "E1", "reviewPeriod": "2025", "performanceRating": "A"})
    assert resp.status_code == 201
    review = resp.get_json()
    assert set(review) == {"id", "employeeId", "reviewPeriod", "performanceRating", "comments"}

    resp = client.put(f"/api/performance/{review['id']}", json={"employeeId": "E1", "performanceRating": "B"})
    assert resp.status_code == 200
    assert resp.get_json()["performanceRating"] == "B"

    assert client.put("/api/performance/missing", json={"employeeId": "E1"}).status_code == 404


# -------- Employees --------
def test_employee_routes(client):
    emp = client.post(
        "/employees",
        json={"employeeId": "EMP0001", "email": "a@x.io", "department": "IT", "baseSalary": "4200.50"},
    ).get_json()
    assert emp["baseSalary"] == 4200.5
    assert emp["status"] == "ACTIVE"

    assert client.get("/employees/employee-id/EMP0001").get_json()["id"] == emp["id"]
    assert client.get("/employees/exists/EMP0001").get_json() == {"employeeId": "EMP0001", "exists": True}
    assert client.get("/employees/exists/EMP0002").get_json()["exists"] is False
    assert client.get("/employees/employee-id/EMP0002").status_code == 404


# -------- Shared behaviour --------
@pytest.mark.parametrize(
    "collection_url, payload",
    [
        ("/employees", {"employeeId": "EMP1"}),
        ("/leaves", {"employeeId": "E1"}),
        ("/payroll", {"employeeId": "E1"}),
        ("/recruitment/jobs", {"title": "T"}),
        ("/recruitment/applications", {"applicantName": "A"}),
        ("/api/performance", {"employeeId": "E1"}),
    ],
)
def test_delete_then_get_is_not_found(client, collection_url, payload):
    record = client.post(collection_url, json=payload).get_json()
    url = f"{collection_url}/{record['id']}"

    assert client.get(url).status_code == 200
    resp = client.delete(url)
    assert resp.status_code == 204
    assert resp.data == b""
    resp = client.get(url)
    assert resp.status_code == 404
    assert resp.data == b""
    assert client.delete(url).status_code == 204
    assert client.get(collection_url).get_json() == []


def test_unknown_route_keeps_404(client):
    assert client.get("/does-not-exist").status_code == 404


def test_unexpected_errors_become_500(app, client, container, monkeypatch):
    def boom():
        raise RuntimeError("db down")

    monkeypatch.setattr(container.leave_service, "list_leaves", boom)
    resp = client.get("/leaves")
    assert resp.status_code == 500
    assert resp.get_json() == {"success": False, "message": "Internal server error"}
