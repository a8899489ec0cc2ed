from typing import Optional

from app.models.common import CropImage
from app.services.insight_service import diagnose_crop
from app.views.base import BaseView


class CropDoctorView(BaseView):
    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.image: Optional[CropImage] = None
        self.analysis: Optional[str] = None

    def set_image(self, image: CropImage) -> None:
        self.image = image
        self.analysis = None
        # A new photo invalidates any analysis still in flight
        self._guard.begin("analysis")
        self.loading = False

    async def analyze(self) -> Optional[str]:
        if self.image is None:
            return None
        ticket = self._guard.begin("analysis")
        self.loading = True
        analysis = await diagnose_crop(self.image, self.context)
        if not self._guard.is_current("analysis", ticket):
            return None
        self.analysis = analysis
        self.loading = False
        return analysis
