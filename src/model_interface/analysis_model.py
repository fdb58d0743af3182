from .types import Company, StockData

class AnalysisModel:
    def analyze(self, company: Company) -> StockData:
        raise NotImplementedError
