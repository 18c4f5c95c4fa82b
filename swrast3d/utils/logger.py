# swrast3d/utils/logger.py
# ---------------------------------------------------------------
# Минимальный логгер движка. GL‑проверки живут в window.py,
# чтобы ядро не тянуло OpenGL при импорте.
# ---------------------------------------------------------------

import logging


def init_logger():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    return logging.getLogger("SWRast3D")


logger = init_logger()
