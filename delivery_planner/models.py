# models.py
# Very simple data containers for DeliveryJob, BoxCount and PlannerConfig
# Jobs and box counts are read-only once built.


class DeliveryJob:
    def __init__(self, resource_name, drops=None):
        # Name the player typed for the resource (not unique across jobs)
        self._resource_name = resource_name

        # location name -> units to drop there
        self._drops = dict(drops or {})

    @property
    def resource_name(self):
        return self._resource_name

    @property
    def drops(self):
        # A copy, so callers can't change the job behind the planner's back
        return dict(self._drops)

    @property
    def total_needed(self):
        # Pickup amount = everything we have to drop
        return sum(self._drops.values())

    def __repr__(self):
        return f"DeliveryJob({self._resource_name!r}, {self._drops!r})"


class BoxCount:
    def __init__(self, box4=0, box2=0, box1=0):
        self._boxes = (box4, box2, box1)

    @property
    def box4(self):
        return self._boxes[0]

    @property
    def box2(self):
        return self._boxes[1]

    @property
    def box1(self):
        return self._boxes[2]

    @property
    def total(self):
        return self.box4 * 4 + self.box2 * 2 + self.box1

    def __eq__(self, other):
        if not isinstance(other, BoxCount):
            return NotImplemented
        return self._boxes == other._boxes

    def __hash__(self):
        return hash(self._boxes)

    def __repr__(self):
        return f"BoxCount(box4={self.box4}, box2={self.box2}, box1={self.box1})"

    def __str__(self):
        return f"4u: {self.box4}, 2u: {self.box2}, 1u: {self.box1}"


class PlannerConfig:
    def __init__(self, location_count=4, name_width=15):
        self.location_count = location_count
        self.name_width = name_width
