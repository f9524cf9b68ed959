# Scoring stages module
from .stage1_segment import SegmentClassificationStage
from .stage2_title import TitleAuthorityStage
from .stage3_signals import CompanySignalStage
from .stage4_size import CompanySizeStage
