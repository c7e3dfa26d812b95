import datetime

from .base import SendGridClient


class StatsManager(SendGridClient):
    def get_stats(self, days: int = 30):
        """
        Fetches general account statistics.

        :param days: how many days back the statistics start
        :return: API response JSON
        """
        start_date = datetime.date.today() - datetime.timedelta(days=days)
        return self._request("stats", {"start_date": start_date.strftime("%Y-%m-%d")})
