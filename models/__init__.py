from models.inputs import ModelInputs
from models.process import ProcessConfig
from models.issue import IssueScenario
from models.state import ModelState
from models.totals import ComputedTotals, ProcessVolumes
