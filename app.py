# app.py
# Web app to upload a jobs CSV, see the pickup summary and the drops per
# location, and download the plan as CSV.

import io
import pandas as pd
import streamlit as st

from delivery_planner.inputs import InputError, build_job, is_done, normalize_location_names
from delivery_planner.logging_config import setup_logging
from delivery_planner.models import PlannerConfig
from delivery_planner.planner import name_key, plan_to_rows, process_jobs
from delivery_planner.report import format_report


st.set_page_config(page_title="Delivery Calculator", layout="wide")
setup_logging()


def jobs_from_dataframe(df, location_names):
    jobs = []
    skipped = []
    for _, row in df.iterrows():
        resource = row.iloc[0]
        if pd.isna(resource) or str(resource).strip() == "":
            continue
        if is_done(str(resource)):
            break

        amounts = []
        for value in row.iloc[1:]:
            amounts.append("" if pd.isna(value) else str(value))

        job = build_job(str(resource), amounts, location_names)
        if job is None:
            skipped.append(str(resource))
        else:
            jobs.append(job)
    return jobs, skipped


def boxes_table(entries, units_label):
    rows = []
    for job_name, boxes in entries:
        rows.append({
            "job": job_name,
            units_label: boxes.total,
            "4u boxes": boxes.box4,
            "2u boxes": boxes.box2,
            "1u boxes": boxes.box1,
        })
    return pd.DataFrame(rows)


st.title("Delivery Calculator")
st.write(
    "Upload a CSV with a 'resource' column followed by one column per "
    "delivery location. Each row is one job."
)

uploaded_file = st.file_uploader("Upload CSV file", type=["csv"])

st.sidebar.header("Settings")
defaults = PlannerConfig()
location_count = st.sidebar.number_input(
    "Number of locations", min_value=1, value=defaults.location_count, step=1
)
name_width = st.sidebar.number_input(
    "Report name column width", min_value=1, value=defaults.name_width, step=1
)

if uploaded_file is not None:
    # Keep amounts as text so blank cells and bad entries reach build_job as typed
    df = pd.read_csv(uploaded_file, dtype=str, keep_default_na=False)

    st.subheader("Uploaded Jobs")
    st.dataframe(df)

    try:
        # pandas names blank headers "Unnamed: N"; those get default names
        headers = ["" if str(c).startswith("Unnamed:") else str(c) for c in df.columns[1:]]
        location_names = normalize_location_names(headers, int(location_count))
        jobs, skipped = jobs_from_dataframe(df, location_names)
    except InputError as e:
        st.error(str(e))
        st.stop()

    st.write("Locations set:", ", ".join(location_names))
    for name in skipped:
        st.warning(f"Job for {name} skipped: Total units to deliver was 0.")

    if len(jobs) == 0:
        st.warning("No jobs were entered.")
    else:
        result = process_jobs(jobs, location_names)

        st.subheader("Resource Pickup Summary")
        st.dataframe(boxes_table(result["pickup_summary"], "total units"))

        st.subheader("Location Dropoff List")
        for location in sorted(result["location_drops"], key=name_key):
            drop_list = result["location_drops"][location]
            if len(drop_list) == 0:
                continue
            st.markdown(f"**{location}**")
            st.dataframe(boxes_table(drop_list, "drop units"))

        st.markdown(f"**Total units to haul:** {result['total_units']}")

        with st.expander("Text report"):
            st.code(format_report(result, int(name_width)))

        plan_df = pd.DataFrame(plan_to_rows(result))
        csv_buffer = io.StringIO()
        plan_df.to_csv(csv_buffer, index=False)
        st.download_button(
            label="Download delivery plan as CSV",
            data=csv_buffer.getvalue(),
            file_name="delivery_plan.csv",
            mime="text/csv"
        )
else:
    st.info("Upload a CSV file to begin.")
