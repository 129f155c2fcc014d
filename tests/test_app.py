"""Tests for the Streamlit pages, driven through streamlit's AppTest."""

from decimal import Decimal
from pathlib import Path

import pytest
import streamlit as st
from streamlit.testing.v1 import AppTest

from moneymate.config import get_settings
from moneymate.models import Loan
from moneymate.services.storage import LocalFileByteStore, encode_loans


APP_PATH = Path(__file__).resolve().parents[1] / "app" / "main.py"


@pytest.fixture
def data_dir(monkeypatch, tmp_path):
    """Point the app at an empty data directory."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("MONEYMATE_STORAGE_DATA_DIR", str(tmp_path / "data"))
    get_settings.cache_clear()
    st.cache_resource.clear()
    yield tmp_path / "data"
    get_settings.cache_clear()
    st.cache_resource.clear()


class TestLoansPage:
    """Tests for the Loans Given page."""

    def test_loan_text_is_escaped_in_cards(self, data_dir):
        """Markup typed into a name or reason is shown as text."""
        loan = Loan(amount=Decimal("40"), recipient="</div><b>Sam", reason="<i>lunch")
        LocalFileByteStore(data_dir).write("loans.json", encode_loans([loan]))

        at = AppTest.from_file(str(APP_PATH))
        at.session_state["page"] = "🤝 Loans Given"
        at.run()

        assert not at.exception
        cards = [m.value for m in at.markdown if 'class="loan-card"' in m.value]
        assert len(cards) == 1
        assert "&lt;/div&gt;&lt;b&gt;Sam" in cards[0]
        assert "&lt;i&gt;lunch" in cards[0]
        assert "<b>Sam" not in cards[0]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
