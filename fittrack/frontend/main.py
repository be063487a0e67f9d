import streamlit as st
import requests
import plotly.express as px
import pandas as pd
from datetime import date

from fittrack.config import get_settings
from fittrack.frontend.goals import delete_goal, response_error as error_message
from fittrack.frontend.progress import ProgressTracker, TOKEN_KEY, entry_rows

# Configure the page
st.set_page_config(
    page_title="Fitness Tracker",
    page_icon="💪",
    layout="wide"
)

settings = get_settings()
API_URL = settings.API_URL.rstrip("/")
TIMEOUT = settings.REQUEST_TIMEOUT

def get_headers():
    """Get headers for authenticated requests"""
    token = st.session_state.get(TOKEN_KEY)
    if token:
        return {"Authorization": f"Bearer {token}"}
    return {}

def init_session_state():
    """Initialize session state variables."""
    if TOKEN_KEY not in st.session_state:
        st.session_state[TOKEN_KEY] = None
    if "user" not in st.session_state:
        st.session_state.user = None
    if "current_page" not in st.session_state:
        st.session_state.current_page = "Progress"

def login():
    """Login and signup forms."""
    st.title("💪 Fitness Tracker")

    tab1, tab2 = st.tabs(["Login", "Sign up"])

    with tab1:
        with st.form("login_form"):
            email = st.text_input("Email", key="login_email")
            password = st.text_input("Password", type="password", key="login_password")
            submitted = st.form_submit_button("Login")

            if submitted:
                try:
                    response = requests.post(
                        f"{API_URL}/login",
                        json={"email": email, "password": password},
                        timeout=TIMEOUT
                    )
                    if response.status_code == 201:
                        st.session_state[TOKEN_KEY] = response.json()["token"]
                        profile = requests.get(
                            f"{API_URL}/profile", headers=get_headers(), timeout=TIMEOUT
                        )
                        if profile.ok:
                            st.session_state.user = profile.json()
                        st.rerun()
                    else:
                        st.error(error_message(response))
                except requests.RequestException as e:
                    st.error(f"Error during login: {str(e)}")

    with tab2:
        with st.form("signup_form"):
            name = st.text_input("Name")
            reg_email = st.text_input("Email", key="signup_email")
            reg_password = st.text_input("Password", type="password", key="signup_password")
            col1, col2 = st.columns(2)
            with col1:
                age = st.number_input("Age", min_value=0, max_value=120, value=30)
                height = st.number_input("Height (cm)", min_value=50.0, max_value=250.0, value=175.0)
                gender = st.selectbox("Gender", ["Male", "Female", "Other"])
            with col2:
                weight = st.number_input("Weight (kg)", min_value=20.0, max_value=300.0, value=70.0)
                contact_number = st.text_input("Contact Number")

            submitted = st.form_submit_button("Sign up")

            if submitted:
                try:
                    response = requests.post(
                        f"{API_URL}/signup",
                        json={
                            "name": name,
                            "email": reg_email,
                            "password": reg_password,
                            "age": age,
                            "gender": gender,
                            "height": height,
                            "weight": weight,
                            "contactNumber": contact_number or None,
                        },
                        timeout=TIMEOUT
                    )
                    if response.status_code == 201:
                        st.success("Registration successful! Please log in.")
                    else:
                        st.error(f"Registration failed: {error_message(response)}")
                except requests.RequestException as e:
                    st.error(f"Error during registration: {str(e)}")

def logout():
    """Clear session state."""
    st.session_state[TOKEN_KEY] = None
    st.session_state.user = None
    st.session_state.pop("progress_tracker", None)
    st.rerun()

def show_goals():
    st.header("🎯 Fitness Goals")

    with st.form("goal_form", clear_on_submit=True):
        col1, col2, col3 = st.columns(3)
        with col1:
            goal_type = st.text_input("Goal Type", placeholder="Weight Loss")
        with col2:
            target = st.number_input("Target", min_value=0.0, value=10.0)
        with col3:
            timeline = st.text_input("Timeline", placeholder="3 months")
        if st.form_submit_button("Add Goal"):
            try:
                response = requests.post(
                    f"{API_URL}/fitnessGoals",
                    json={"goalType": goal_type, "target": target, "timeline": timeline},
                    headers=get_headers(),
                    timeout=TIMEOUT
                )
                if response.ok:
                    st.success("Goal added")
                else:
                    st.error(error_message(response))
            except requests.RequestException as e:
                st.error(f"Error adding goal: {str(e)}")

    try:
        response = requests.get(f"{API_URL}/fitnessGoals", headers=get_headers(), timeout=TIMEOUT)
    except requests.RequestException as e:
        st.error(f"Error loading goals: {str(e)}")
        return
    if not response.ok:
        st.error(f"Failed to load goals: {error_message(response)}")
        return

    user_id = (st.session_state.user or {}).get("id")
    goals = [goal for goal in response.json() if goal.get("userId") == user_id]
    if not goals:
        st.info("No goals yet.")
        return

    for goal in goals:
        col1, col2 = st.columns([4, 1])
        with col1:
            st.markdown(f"**{goal['goalType']}**: {goal['target']:g} in {goal['timeline']}")
        with col2:
            if st.button("🗑️ Delete", key=f"delete_{goal['id']}"):
                error = delete_goal(API_URL, goal["id"], get_headers(), timeout=TIMEOUT)
                if error:
                    st.error(error)
                else:
                    st.rerun()

def show_progress():
    """Progress form, table and weight chart."""
    st.header("📈 Progress Tracking")

    if "progress_tracker" not in st.session_state:
        tracker = ProgressTracker(API_URL, token=st.session_state[TOKEN_KEY], timeout=TIMEOUT)
        tracker.load()
        st.session_state.progress_tracker = tracker
    tracker = st.session_state.progress_tracker

    with st.form("progress_form", clear_on_submit=True):
        entry_date = st.date_input("Date:", date.today())
        weight = st.number_input("Weight (in kg):", min_value=0.0, max_value=300.0, value=70.0, step=0.1)
        body_measurements = st.text_input("Body Measurements:")
        notes = st.text_area("Notes:")
        if st.form_submit_button("Track Progress"):
            tracker.submit({
                "date": entry_date.isoformat(),
                "weight": weight,
                "bodyMeasurements": body_measurements or None,
                "notes": notes or None,
            })

    if tracker.error:
        st.error(tracker.error)

    if not tracker.entries:
        st.info("No progress entries yet.")
        return

    st.table(pd.DataFrame(entry_rows(tracker.entries)))

    df = pd.DataFrame(tracker.entries)
    df["date"] = pd.to_datetime(df["date"])
    fig = px.line(df, x="date", y="weight",
                  title="Weight Over Time",
                  labels={"weight": "Weight (kg)", "date": "Date"})
    st.plotly_chart(fig, use_container_width=True)

def main():
    """Main application entry point."""
    init_session_state()

    if not st.session_state[TOKEN_KEY]:
        login()
        return

    user = st.session_state.user or {}
    st.sidebar.markdown(f"**Welcome, {user.get('name', 'User')}!**")
    if st.sidebar.button("🚪 Logout"):
        logout()
        return

    st.sidebar.markdown("---")
    st.sidebar.markdown("**Navigation**")
    if st.sidebar.button("📈 Progress"):
        st.session_state.current_page = "Progress"
        st.rerun()
    if st.sidebar.button("🎯 Goals"):
        st.session_state.current_page = "Goals"
        st.rerun()

    if st.session_state.current_page == "Goals":
        show_goals()
    else:
        show_progress()

if __name__ == "__main__":
    main()
