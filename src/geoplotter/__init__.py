from geoplotter.Project import Project, ProfileResult
from geoplotter.Settings import Settings
from geoplotter.Survey import VLFSurvey, ResSurvey, groupBySpacing, vlfStats, resStats
from geoplotter.parsers import parseVLF, parseResistivity
from geoplotter.geomTools import computeK, resolveRho
from geoplotter.filters import khFilter

GeoPlotter_version = '1.0.0'
