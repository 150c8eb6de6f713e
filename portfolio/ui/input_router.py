from typing import Optional

from portfolio.ui.carousel import CarouselController

KEY_LEFT = "ArrowLeft"
KEY_RIGHT = "ArrowRight"


class InputRouter:
    """
    Roteia setas do teclado para o carrossel que tem conteúdo.
    O alvo é reavaliado a cada tecla (artigos, se houver; senão projetos).
    """

    def __init__(self, project_carousel: CarouselController, article_carousel: CarouselController):
        self.project_carousel = project_carousel
        self.article_carousel = article_carousel

    def target(self) -> CarouselController:
        if self.article_carousel.item_count > 0:
            return self.article_carousel
        return self.project_carousel

    def handle_key(self, key: str, focus_in_text_entry: bool = False) -> Optional[CarouselController]:
        """Retorna o carrossel acionado, ou None se a tecla foi ignorada."""
        if focus_in_text_entry or key not in (KEY_LEFT, KEY_RIGHT):
            return None
        carousel = self.target()
        if key == KEY_RIGHT:
            carousel.advance()
        else:
            carousel.retreat()
        return carousel
