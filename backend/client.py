# backend/client.py
import requests

API = "http://localhost:8000/api/v1"  # adjust if running on docker-compose

def check_health():
    r = requests.get(f"{API}/health")
    print("Health:", r.status_code, r.json())

def check_generate(question):
    r = requests.post(f"{API}/query/generate", json={"question": question})
    print("Generate:", r.status_code, r.json())
    return r.json().get("sql")

def check_run(sql):
    r = requests.post(f"{API}/query/run", json={"sql": sql})
    print("Run:", r.status_code, r.json())
    return r.json().get("rows", [])

def check_explain(question, sql):
    r = requests.post(f"{API}/query/explain", json={"question": question, "sql": sql})
    print("Explain:", r.status_code, r.json())

def check_chart(rows, question):
    r = requests.post(f"{API}/chart", json={"rows": rows, "question": question})
    print("Chart:", r.status_code, r.json())

def check_guard():
    r = requests.post(f"{API}/query/run", json={"sql": "DELETE FROM unicorns"})
    print("Guard:", r.status_code, r.json())

if __name__ == "__main__":
    print("--- Smoke testing FastAPI backend ---")
    question = "Which industries have the most unicorns?"
    check_health()
    sql = check_generate(question)
    rows = check_run(sql)
    check_explain(question, sql)
    check_chart(rows, question)
    check_guard()
