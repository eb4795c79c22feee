# Movie Browser - Streamlit front end
# Run: streamlit run streamlit_app.py

import logging

import streamlit as st
from st_clickable_images import clickable_images

from movie_browser import ApiError, MovieBrowser, RouteError, config
from movie_browser.images import has_image_path
from movie_browser.render import fail_image

config.configure_logging()
logger = logging.getLogger("streamlit_app")

st.set_page_config(
    page_title="Movie Browser",
    page_icon="🎬",
    layout="wide"
)

# Dark theme + white text + red buttons
st.markdown("""
<style>
#MainMenu, footer, header {visibility: hidden;}
.stDeployButton {display: none;}

.stApp {
    background: #0a0a0f;
}

.stApp, .stMarkdown, .stText, p, span, label, .stCaption, h1, h2, h3, h4, h5, h6 {
    color: #ffffff !important;
}

.block-container {
    padding-top: 1rem !important;
    padding-bottom: 0 !important;
}

.stButton > button {
    background: linear-gradient(135deg, #e50914 0%, #b81d24 100%);
    color: white !important;
    border: none;
    font-weight: bold;
}
.stButton > button:hover {
    background: linear-gradient(135deg, #ff1a1a 0%, #d32f2f 100%);
}

.header-poster {
    height: 40vh;
    border-radius: 0 0 20px 20px;
    background-size: cover !important;
    background-position: center !important;
    margin-bottom: 15px;
}
.movie-score {
    color: #ea696f !important;
    font-weight: 700;
}
</style>
""", unsafe_allow_html=True)

if not config.TMDB_API_KEY:
    st.warning("⚠️ TMDB_API_KEY not set. Set it in your environment or a .env file.")

# The view query parameter plays the role of the address-bar hash
VIEW_PARAM = "view"

GRID_DIV_STYLE = {
    "display": "flex",
    "justify-content": "flex-start",
    "flex-wrap": "wrap",
    "gap": "10px"
}
GRID_IMG_STYLE = {
    "width": "18%",
    "border-radius": "10px",
    "cursor": "pointer",
    "box-shadow": "0 4px 10px rgba(0,0,0,0.3)"
}


def requested_view():
    value = st.query_params.get(VIEW_PARAM, "")
    return f"#{value}" if value else ""


def sync_view(browser):
    """Write the document hash back to the address bar."""
    view = browser.hash.lstrip("#")
    if view:
        st.query_params[VIEW_PARAM] = view
    elif VIEW_PARAM in st.query_params:
        del st.query_params[VIEW_PARAM]


def run_safely(action, *args):
    """Run a browser action, reporting fetch and address errors on the page."""
    try:
        action(*args)
        return True
    except ApiError as e:
        logger.error(f"Navigation failed: {e}")
        st.error(f"⚠️ Could not load from TMDB: {e}")
    except RouteError as e:
        logger.error(f"Bad address: {e}")
        st.error(f"⚠️ Unknown address: {e}")
    return False


def act(browser, action, *args):
    """Run an action triggered by a widget and redraw on success."""
    ok = run_safely(action, *args)
    sync_view(browser)
    if ok:
        st.rerun()


def visible(element):
    return "inactive" not in element.class_list


# ===== SESSION =====
if "browser" not in st.session_state:
    st.session_state.browser = MovieBrowser()
    run_safely(st.session_state.browser.start, requested_view())
elif requested_view() != st.session_state.browser.hash:
    # Address edited by hand or browser back/forward
    run_safely(st.session_state.browser.go, requested_view())

browser = st.session_state.browser
ui = browser.layout
generation = browser.router.generation


def movie_grid(target, key):
    """Poster grid for a rendered movie list; clicks and likes go back to the nodes."""
    cards = target.query_all(".movie-container")
    if not cards:
        st.info("Nothing to show here.")
        return

    images = [card.query(".movie-img") for card in cards]
    likes = [card.query(".movie-btn") for card in cards]

    # Everything placed in the grid is on screen
    browser.lazy_loader.reveal(images)
    for img in images:
        if not has_image_path(img.get_attribute("src") or ""):
            fail_image(img)

    clicked = clickable_images(
        paths=[img.get_attribute("src") for img in images],
        titles=[img.get_attribute("alt") for img in images],
        div_style=GRID_DIV_STYLE,
        img_style=GRID_IMG_STYLE,
        key=f"{key}_{generation}"
    )
    if clicked > -1:
        act(browser, images[clicked].click)

    liked_before = [i for i, btn in enumerate(likes) if "movie-btn--liked" in btn.class_list]
    liked = st.multiselect(
        "❤️ Liked",
        options=list(range(len(likes))),
        default=liked_before,
        format_func=lambda i: images[i].get_attribute("alt"),
        key=f"{key}_likes_{generation}_{len(likes)}"
    )
    for i in set(liked) ^ set(liked_before):
        likes[i].click()


def category_buttons(target, key):
    titles = target.query_all(".category-title")
    cols = st.columns(4)
    for idx, title in enumerate(titles):
        with cols[idx % 4]:
            if st.button(title.text_content, key=f"{key}_{title.id}_{generation}", use_container_width=True):
                act(browser, title.click)


# ===== HEADER =====
c1, c2, c3 = st.columns([1, 1, 8])
with c1:
    if visible(ui.header_arrow) and st.button("⬅️", key="header_arrow"):
        act(browser, ui.header_arrow.click)
with c2:
    if st.button("🏠", key="header_home"):
        act(browser, ui.header_home.click)
with c3:
    if visible(ui.header_title):
        st.title(f"🎬 {ui.header_title.text_content}")
    if visible(ui.header_category_title):
        st.title(ui.header_category_title.text_content)

if "background" in ui.header.style:
    st.markdown(
        f'<div class="header-poster" style="background: {ui.header.style["background"]};"></div>',
        unsafe_allow_html=True
    )

if visible(ui.search_form):
    with st.form("searchForm", clear_on_submit=False):
        query = st.text_input("Search", placeholder="Find a movie...", label_visibility="collapsed")
        if st.form_submit_button("🔍 Search"):
            act(browser, browser.submit_search, query)


# ===== HOME: PREVIEWS =====
if visible(ui.trending_preview):
    c1, c2 = st.columns([8, 2])
    with c1:
        st.subheader("Trending")
    with c2:
        if st.button(ui.trending_button.text_content, key="trending_more", use_container_width=True):
            act(browser, ui.trending_button.click)
    movie_grid(ui.trending_list, "trending_preview")

if visible(ui.categories_preview):
    st.subheader("Categories")
    category_buttons(ui.categories_list, "categories_preview")


# ===== LISTINGS: TRENDING / CATEGORY / SEARCH =====
if visible(ui.generic_list):
    movie_grid(ui.generic_list, "generic_list")
    listing = browser.listing
    if listing is not None and listing.has_more:
        st.caption(f"Page {listing.current_page} of {listing.max_page}")
        if st.button("Load more", key="load_more", use_container_width=True):
            act(browser, browser.load_more)


# ===== MOVIE DETAIL =====
if visible(ui.movie_detail):
    st.header(ui.detail_title.text_content)
    st.markdown(
        f'<span class="movie-score">⭐ {ui.detail_score.text_content}</span>',
        unsafe_allow_html=True
    )
    st.write(ui.detail_description.text_content)
    category_buttons(ui.detail_categories, "detail_categories")
    st.subheader("Related movies")
    movie_grid(ui.related_movies, "related_movies")
