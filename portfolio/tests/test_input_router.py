# portfolio/tests/test_input_router.py
from portfolio.ui.carousel import CarouselController
from portfolio.ui.input_router import InputRouter

def _router(projects=5, articles=0):
    p, a = CarouselController(projects), CarouselController(articles)
    return InputRouter(p, a), p, a

def test_routes_to_projects_when_no_articles():
    router, projects, articles = _router()
    assert router.handle_key("ArrowRight") is projects
    assert projects.index == 1
    router.handle_key("ArrowLeft")
    router.handle_key("ArrowLeft")
    assert projects.index == 4

def test_target_follows_article_count():
    router, projects, articles = _router()
    router.handle_key("ArrowRight")
    articles.set_item_count(3)
    assert router.handle_key("ArrowRight") is articles
    assert (projects.index, articles.index) == (1, 1)
    articles.set_item_count(0)
    assert router.target() is projects

def test_ignored_in_text_entry_and_for_other_keys():
    router, projects, _ = _router()
    assert router.handle_key("ArrowRight", focus_in_text_entry=True) is None
    assert router.handle_key("Enter") is None
    assert projects.index == 0
