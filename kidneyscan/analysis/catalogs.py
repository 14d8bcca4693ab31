from kidneyscan.analysis.models import ParameterDefinition, RiskTier

CKD_PARAMETERS: tuple[ParameterDefinition, ...] = (
    ParameterDefinition("Blood Pressure (BP)", "bp", "mmHg"),
    ParameterDefinition("Specific Gravity (SG)", "sg", ""),
    ParameterDefinition("Albumin (AL)", "al", "g/dL"),
    ParameterDefinition("Blood Glucose Random (BGR)", "bgr", "mg/dL"),
    ParameterDefinition("Blood Urea (BU)", "bu", "mg/dL"),
    ParameterDefinition("Serum Creatinine (SC)", "sc", "mg/dL"),
    ParameterDefinition("Sodium (SOD)", "sod", "mEq/L"),
    ParameterDefinition("Potassium (POT)", "pot", "mEq/L"),
    ParameterDefinition("Hemoglobin (HEMO)", "hemo", "g/dL"),
    ParameterDefinition("Packed Cell Volume (PCV)", "pcv", "%"),
    ParameterDefinition("White Blood Cells (WC)", "wc", "/cu.mm"),
    ParameterDefinition("Red Blood Cells Count (RC)", "rc", "millions/cu.mm"),
)

OTHER_ISSUES: tuple[str, ...] = (
    "Irregular cell structure detected",
    "Abnormal tissue density observed",
    "Unusual membrane formation",
    "Cellular degradation present",
    "Tissue scarring detected",
)

RECOMMENDATIONS: dict[RiskTier, tuple[str, ...]] = {
    RiskTier.HIGH: (
        "Immediate nephrology consultation required",
        "Begin intensive kidney function monitoring",
        "Schedule follow-up biopsy in 2 weeks",
        "Consider dialysis preparation",
        "Strict dietary restrictions recommended",
    ),
    RiskTier.MEDIUM: (
        "Schedule follow-up examination in 1 month",
        "Monitor blood pressure daily",
        "Dietary sodium restriction advised",
        "Regular blood work every 2 weeks",
        "Consider preventive medications",
    ),
    RiskTier.LOW: (
        "Routine follow-up in 3 months",
        "Maintain healthy diet and exercise",
        "Monitor blood pressure weekly",
        "Annual kidney function screening",
        "Stay well hydrated",
    ),
}

DIETARY_RECOMMENDATIONS: tuple[str, ...] = (
    "Limit sodium intake to less than 2,300mg per day",
    "Reduce protein intake to 0.8g per kg of body weight",
    "Choose foods low in phosphorus",
    "Limit potassium-rich foods",
    "Increase intake of anti-inflammatory foods",
    "Stay hydrated with appropriate fluid intake",
    "Avoid processed and packaged foods",
    "Include omega-3 rich foods in diet",
    "Choose whole grains over refined grains",
    "Monitor calcium intake carefully",
)

LIFESTYLE_RECOMMENDATIONS: tuple[str, ...] = (
    "Maintain regular physical activity with doctor's approval",
    "Get adequate sleep (7-8 hours per night)",
    "Monitor blood pressure regularly",
    "Avoid smoking and limit alcohol consumption",
    "Practice stress management techniques",
    "Keep a food and symptom diary",
    "Attend all scheduled medical appointments",
    "Join a kidney disease support group",
    "Learn about kidney-friendly cooking methods",
    "Take prescribed medications consistently",
)
