"""Streamlit UI for the knowledge sidekick.

Run with: streamlit run ui/app.py
"""

# Add project root to sys.path for imports to work when run via streamlit
import sys
from pathlib import Path

_ROOT = Path(__file__).resolve().parents[1]
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import os  # noqa: E402

import httpx  # noqa: E402
import streamlit as st  # noqa: E402

from ui.helpers import (  # noqa: E402
    create_user_message,
    error_detail,
    format_file_size,
    send_chat_message,
    to_markdown,
    upload_document,
)

# Configuration
BACKEND_URL = os.getenv("BACKEND_URL", "http://localhost:8000")

# Page config
st.set_page_config(
    page_title="AI Knowledge Sidekick",
    page_icon="📄",
    layout="wide",
)

# Initialize session state
if "documents" not in st.session_state:
    st.session_state.documents = []
if "selected_doc_id" not in st.session_state:
    st.session_state.selected_doc_id = None
if "messages" not in st.session_state:
    st.session_state.messages = []
if "uploaded_file_ids" not in st.session_state:
    st.session_state.uploaded_file_ids = set()

st.title("📄 AI Knowledge Sidekick")
st.markdown("*Ask questions answered only from your document*")
st.divider()

col_left, col_right = st.columns([1, 2.5])

# =============================================================================
# LEFT COLUMN - UPLOAD + DOCUMENT LIST
# =============================================================================
with col_left:
    st.subheader("Upload document")
    st.caption("Supports .txt and .pdf files")

    uploaded = st.file_uploader("Choose file", type=["txt", "pdf"])
    if uploaded is not None and uploaded.file_id not in st.session_state.uploaded_file_ids:
        try:
            doc = upload_document(BACKEND_URL, uploaded.name, uploaded.getvalue())
            st.session_state.documents.append(doc)
            st.session_state.uploaded_file_ids.add(uploaded.file_id)
            if st.session_state.selected_doc_id is None:
                st.session_state.selected_doc_id = doc["id"]
        except httpx.HTTPStatusError as e:
            st.error(f"Failed to upload document: {error_detail(e)}")
        except httpx.HTTPError as e:
            st.error(f"Failed to upload document: {e}")

    st.subheader("Documents")
    if not st.session_state.documents:
        st.caption("No documents yet. Upload one to get started.")
    else:
        labels = {
            doc["id"]: f"{doc['name']} ({format_file_size(doc['size'])})"
            for doc in st.session_state.documents
        }
        ids = list(labels)
        selected = st.radio(
            "Select a document",
            ids,
            index=ids.index(st.session_state.selected_doc_id)
            if st.session_state.selected_doc_id in ids
            else 0,
            format_func=lambda doc_id: labels[doc_id],
        )
        st.session_state.selected_doc_id = selected

# =============================================================================
# RIGHT COLUMN - CHAT
# =============================================================================
with col_right:
    st.subheader("Chat")

    for message in st.session_state.messages:
        with st.chat_message(message["role"]):
            st.markdown(to_markdown(message["content"]))

    prompt = st.chat_input("Ask a question about the selected document")
    if prompt:
        text = prompt.strip()
        if not st.session_state.selected_doc_id:
            st.error("Please select a document first")
        elif text:
            user_message = create_user_message(text)
            st.session_state.messages.append(user_message)
            with st.chat_message("user"):
                st.markdown(text)

            with st.chat_message("assistant"):
                with st.spinner("Thinking..."):
                    try:
                        reply = send_chat_message(
                            BACKEND_URL,
                            st.session_state.selected_doc_id,
                            st.session_state.messages,
                            text,
                        )
                        st.session_state.messages.append(reply)
                        st.markdown(to_markdown(reply["content"]))
                    except httpx.HTTPStatusError as e:
                        st.error(f"Failed to get a response: {error_detail(e)}")
                    except httpx.HTTPError as e:
                        st.error(f"Failed to get a response: {e}")
