"""Static, phase-keyed guidance tips for the tips page."""

from __future__ import annotations

from luna.cycle.calendar_view import FOLLICULAR_COLOR, LUTEAL_COLOR, MENSTRUAL_COLOR
from luna.models.cycle import Phase, PhaseAssessment, PhaseTipGroup, Tip, TipsResponse

PHASE_TIPS: dict[Phase, PhaseTipGroup] = {
    Phase.pre_ovulation: PhaseTipGroup(
        phase_name="Pre-Ovulation",
        icon="sparkles",
        color=FOLLICULAR_COLOR,
        tips=[
            Tip(
                title="Rising Energy",
                description=(
                    "Your body is preparing for ovulation. Energy and motivation may be "
                    "increasing. Great time for planning and starting new projects."
                ),
            ),
            Tip(
                title="Build Momentum",
                description=(
                    "This phase often brings clarity and focus. Use this time to tackle "
                    "tasks that require sustained attention."
                ),
            ),
            Tip(
                title="Social Connection",
                description=(
                    "You might feel more outgoing and social. Good time to connect with "
                    "others and network."
                ),
            ),
        ],
    ),
    Phase.ovulation: PhaseTipGroup(
        phase_name="Ovulation Detected",
        icon="activity",
        color=FOLLICULAR_COLOR,
        tips=[
            Tip(
                title="Peak Performance",
                description=(
                    "Your body has released an egg. Energy, mood, and cognitive function "
                    "are often at their peak."
                ),
            ),
            Tip(
                title="High-Intensity Activities",
                description=(
                    "This is a great time for challenging workouts, important meetings, "
                    "or creative projects."
                ),
            ),
            Tip(
                title="Communication",
                description=(
                    "Communication skills are often enhanced. Good time for important "
                    "conversations."
                ),
            ),
        ],
    ),
    Phase.luteal: PhaseTipGroup(
        phase_name="Luteal Phase",
        icon="brain",
        color=LUTEAL_COLOR,
        tips=[
            Tip(
                title="Self-Care Priority",
                description=(
                    "Progesterone is high. Listen to your body's need for rest, "
                    "nourishment, and gentler movement."
                ),
            ),
            Tip(
                title="Stable Energy",
                description=(
                    "Support your body with complex carbs, healthy fats, and adequate "
                    "protein to maintain steady energy."
                ),
            ),
            Tip(
                title="Gentle Movement",
                description=(
                    "Yoga, walking, or stretching can feel better than high-intensity "
                    "workouts during this phase."
                ),
            ),
        ],
    ),
    Phase.pre_menstrual: PhaseTipGroup(
        phase_name="Pre-Menstrual",
        icon="heart",
        color=MENSTRUAL_COLOR,
        tips=[
            Tip(
                title="Rest & Recovery",
                description=(
                    "Your period is approaching. Prioritize rest, gentle movement, and "
                    "plenty of sleep."
                ),
            ),
            Tip(
                title="Nourish Your Body",
                description=(
                    "Iron-rich foods, magnesium, and omega-3s can help support your body "
                    "through this transition."
                ),
            ),
            Tip(
                title="Set Boundaries",
                description="It's okay to say no and protect your energy. Honor what your body needs.",
            ),
        ],
    ),
    Phase.insufficient_data: PhaseTipGroup(
        phase_name="Building Baseline",
        icon="brain",
        color=LUTEAL_COLOR,
        tips=[
            Tip(
                title="Consistency Matters",
                description=(
                    "Take your temperature at the same time each morning for the most "
                    "accurate readings."
                ),
            ),
            Tip(
                title="Track Daily",
                description=(
                    "Daily tracking helps us detect your body's unique patterns and "
                    "predict your period more accurately."
                ),
            ),
            Tip(
                title="Trust the Process",
                description=(
                    "Your body's signals are unique. We'll learn your patterns as you "
                    "continue tracking."
                ),
            ),
        ],
    ),
    Phase.transition: PhaseTipGroup(
        phase_name="Transition Phase",
        icon="sparkles",
        color=FOLLICULAR_COLOR,
        tips=[
            Tip(
                title="Watch for Patterns",
                description=(
                    "Your temperature may be shifting. Keep tracking to detect when "
                    "ovulation occurs."
                ),
            ),
            Tip(
                title="Stay Consistent",
                description=(
                    "Continue taking your temperature daily to catch the temperature rise "
                    "that indicates ovulation."
                ),
            ),
        ],
    ),
}

GENERAL_TIPS: list[Tip] = [
    Tip(
        icon="utensils",
        title="Nutrition for Body Literacy",
        description=(
            "Eat a balanced diet rich in whole foods. Your body's needs may shift "
            "throughout your cycle, so listen and respond."
        ),
    ),
    Tip(
        icon="brain",
        title="Understand Your Patterns",
        description=(
            "Track how you feel alongside your temperature. Over time, you'll see "
            "patterns that help you understand your body better."
        ),
    ),
    Tip(
        icon="heart",
        title="Body Wisdom",
        description=(
            "Your body communicates through temperature, energy, and mood. Learning to "
            "read these signals builds self-understanding."
        ),
    ),
]


def tips_for_phase(phase: Phase) -> PhaseTipGroup:
    """Tip group for a phase; phases without their own group get the baseline tips."""
    return PHASE_TIPS.get(phase, PHASE_TIPS[Phase.insufficient_data])


def build_tips(assessment: PhaseAssessment) -> TipsResponse:
    return TipsResponse(
        current_phase=assessment.phase,
        current_phase_name=assessment.phase_name,
        current_phase_tips=tips_for_phase(assessment.phase),
        all_phase_tips=list(PHASE_TIPS.values()),
        general_tips=GENERAL_TIPS,
    )
