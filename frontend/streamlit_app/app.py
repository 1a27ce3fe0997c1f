import os, requests, streamlit as st
import pandas as pd

API = os.getenv("API_URL", "http://localhost:8000/api/v1")

CHART_KINDS = {"bar": st.bar_chart, "line": st.line_chart, "area": st.area_chart, "scatter": st.scatter_chart}

def show_error(r):
    detail = r.json().get("detail", {})
    if isinstance(detail, dict):
        st.error(f"{detail.get('error')}: {detail.get('message')}")
    else:
        st.error(str(detail))

def draw(rows, config):
    df = pd.DataFrame(rows)
    kind = config["type"]
    if kind == "pie":
        # No native pie in streamlit; show the first series as bars.
        st.bar_chart(df, x=config["xKey"], y=config["yKeys"][0])
    else:
        CHART_KINDS[kind](df, x=config["xKey"], y=config["yKeys"])

st.set_page_config(page_title="Unicorn Insights", layout="wide")
st.title("Unicorn Insights — Ask about unicorn companies")

q = st.text_input("e.g., Which countries have the most unicorns?")
if st.button("Ask") and q.strip():
    r = requests.post(f"{API}/query/generate", json={"question": q})
    if not r.ok:
        show_error(r)
        st.stop()
    gen = r.json()
    st.code(gen["sql"], language="sql")
    if gen["source"] == "fallback":
        st.caption("Model unavailable; used a keyword-based query.")

    r = requests.post(f"{API}/query/run", json={"sql": gen["sql"]})
    if not r.ok:
        show_error(r)
        st.stop()
    result = r.json()
    st.dataframe(result["rows"], use_container_width=True)
    if result["csv"]:
        st.download_button("Download CSV", result["csv"], file_name="unicorns.csv")

    r = requests.post(f"{API}/chart", json={"rows": result["rows"], "question": q})
    if r.ok:
        draw(result["rows"], r.json()["config"])
    else:
        show_error(r)

    with st.expander("Explain this query"):
        r = requests.post(f"{API}/query/explain", json={"question": q, "sql": gen["sql"]})
        if r.ok:
            for part in r.json()["explanations"]:
                st.markdown(f"`{part['section']}` {part['explanation']}")
        else:
            st.warning("Explanation unavailable.")
