"""
Компонент для агрегации распределений частей речи.

Сами распределения приходят из внешнего сервиса и прикрепляются к
документам; здесь они только усредняются по корпусу.
"""

import logging
import math
from typing import Optional, Sequence

from ..interfaces.corpus import Document, POSAggregatorInterface, PosBreakdown, POS_FIELDS

logger = logging.getLogger(__name__)


class POSAggregator(POSAggregatorInterface):
    """Усреднитель распределений частей речи."""

    def aggregate(self, docs: Sequence[Document]) -> Optional[PosBreakdown]:
        """
        Усредняет распределения по документам, у которых они есть.

        Каждое поле округляется к ближайшему целому (.5 вверх) независимо; сумма полей может
        отличаться от 100 (известное ограничение).

        Args:
            docs: Набор документов

        Returns:
            Усреднённый PosBreakdown или None, если данных нет
        """
        docs = list(docs or [])
        breakdowns = [doc.pos_data for doc in docs if doc.pos_data is not None]
        if not breakdowns:
            return None

        count = len(breakdowns)
        averaged = {
            name: math.floor(sum(getattr(b, name) for b in breakdowns) / count + 0.5)
            for name in POS_FIELDS
        }
        logger.debug(f"POS агрегирован по {count} документам из {len(docs)}")
        return PosBreakdown(**averaged)
