"""
PharmGap Streamlit UI
- statistics cards
- top-10 recommendations table
- per-area detail view
"""

import sys

import streamlit as st
from dotenv import load_dotenv

if "." not in sys.path:
    sys.path.insert(0, ".")

load_dotenv()

st.set_page_config(
    page_title="PharmGap - Analisis Celah Pasar Apotek",
    page_icon="💊",
    layout="wide",
)

# Session State
if "report" not in st.session_state:
    st.session_state.report = None
if "data_dir" not in st.session_state:
    st.session_state.data_dir = None


@st.cache_resource
def get_orchestrator(data_dir: str):
    """One orchestrator per data directory; datasets load once."""
    from pharmgap.data_sources import GeoJSONSource
    from pharmgap.pipeline import DashboardOrchestrator

    return DashboardOrchestrator(source=GeoJSONSource(base=data_dir))


def main():
    st.title("💊 PharmGap")
    st.subheader("Analisis celah pasar apotek per kelurahan")

    with st.sidebar:
        st.header("⚙️ Data")
        from pharmgap.config import settings

        data_dir = st.text_input("Folder / URL data", value=settings.DATA_DIR)
        if st.button("🔄 Muat ulang", use_container_width=True):
            get_orchestrator.clear()
            st.session_state.report = None

    orchestrator = get_orchestrator(data_dir)

    if st.session_state.report is None or st.session_state.data_dir != data_dir:
        with st.spinner("Memuat data..."):
            st.session_state.report = orchestrator.run()
            st.session_state.data_dir = data_dir

    report = st.session_state.report

    if report.error:
        st.error(f"⚠️ {report.error}")
        return

    render_statistics(report.statistics)
    st.markdown("---")
    render_recommendations(report)
    st.markdown("---")
    render_detail(orchestrator)

    with st.sidebar:
        render_layers(report)
        render_legend(orchestrator)


def render_statistics(stats):
    """Statistics cards"""
    from pharmgap.domain.presentation import format_population

    col1, col2, col3, col4 = st.columns(4)
    col1.metric("👥 Total Penduduk", format_population(stats.reported_population))
    col2.metric("💊 Apotek", format_population(stats.total_pharmacies))
    col3.metric("🏥 Rumah Sakit", format_population(stats.total_hospitals))
    col4.metric("📍 Wilayah Potensial", stats.potential_areas)

    st.caption(
        f"{stats.district_count} kelurahan · "
        f"{stats.underserved_areas} kelurahan butuh apotek (defisit > 0 atau tanpa apotek)"
    )


def render_recommendations(report):
    """Top recommendations table"""
    st.subheader("🏆 Top 10 Rekomendasi Lokasi Apotek")

    if not report.recommendations:
        st.info(report.empty_message)
        return

    medals = {"gold": "🥇", "silver": "🥈", "bronze": "🥉"}
    rows = []
    for row in report.recommendations:
        name = row.name + (" ⚠️ Tanpa Apotek" if row.no_facility else "")
        rows.append({
            "Rank": f"{medals.get(row.rank_class, '')} {row.rank}".strip(),
            "Kelurahan": name,
            "Penduduk": row.population_display,
            "Apotek": row.existing_facilities,
            "Defisit": row.deficit_display,
            "Skor": f"{row.priority_score:.2f}",
            "Status": row.status_label,
        })

    st.dataframe(rows, use_container_width=True, hide_index=True)


def render_detail(orchestrator):
    """Per-area detail view"""
    st.subheader("🔍 Detail Kelurahan")

    names = sorted({area.name for area in orchestrator.load_areas() if area.name})
    if not names:
        st.caption("Tidak ada nama kelurahan di data")
        return

    name = st.selectbox("Kelurahan", names)
    detail = orchestrator.detail(name)
    if detail is None:
        return

    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Penduduk", detail.population_display)
    col2.metric("Apotek Eksisting", detail.existing_facilities)
    col3.metric("Kebutuhan Ideal", detail.ideal_display)
    col4.metric("Defisit", detail.deficit_display)

    if detail.is_potential:
        st.success(f"✅ {detail.status_label}")
    else:
        st.warning(f"❌ {detail.status_label}")


def render_layers(report):
    """Loaded map layers"""
    st.markdown("---")
    st.subheader("🗺️ Layer")
    for layer in report.layers:
        st.caption(f"**{layer.title}** · {layer.kind} · {layer.feature_count} fitur")


def render_legend(orchestrator):
    """Density legend"""
    st.markdown("---")
    st.subheader("Legenda Kepadatan")
    for bin_ in orchestrator.legend():
        st.markdown(
            f"<span style='background:{bin_.color};width:18px;height:12px;"
            f"display:inline-block;margin-right:6px'></span>{bin_.label}",
            unsafe_allow_html=True,
        )


if __name__ == "__main__":
    main()
