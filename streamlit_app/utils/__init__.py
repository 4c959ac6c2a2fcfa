"""
Utility modules for the Streamlit frontend.

This package contains:
- api_client: Recipe service communication
- location: Browser location over st.query_params
- state: Session state wiring for the filter store
"""
